"""
どこで: `engine.core` サブパッケージ。
何を: 点列型 Curve/Viewport・共有状態・アニメーション・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 計算と描画の基盤を構成し、上位層（IO/Runtime/Render）から再利用可能にするため。
"""
