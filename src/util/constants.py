"""
どこで: `util.constants`。
何を: ウィンドウ/形状/アニメーションの既定値。
なぜ: 設定ファイルが無い環境でも既定の見た目（黒背景にオレンジの点）で起動できるようにするため。
"""

DEFAULT_WINDOW_SIZE = (800, 600)
DEFAULT_FPS = 60
DEFAULT_CAPTION = "Midpoint Ellipse Algorithm with Sinusoidal Deformation"
DEFAULT_BACKGROUND = (0.0, 0.0, 0.0, 1.0)
DEFAULT_POINT_COLOR = (1.0, 0.5, 0.2, 1.0)  # オレンジ
DEFAULT_POINT_SIZE = 1.0

# 初期半径 [px]
DEFAULT_RADII = (200.0, 100.0)

# 位相アキュムレータ: elapsed += speed * timestamp
DEFAULT_ANIMATION_SPEED = 0.0005
DEFAULT_ANIMATION_AMPLITUDE = 50.0

# 半径の下限（ループ停止性と非退化の保証）
MIN_RADIUS = 1.0

LAYOUTS = ("single", "split")
