"""
どこで: `engine.runtime` サブパッケージ。
何を: フレームペイロード `CurveFrame` と、入力→生成→描画を結ぶ FrameOrchestrator を提供。
なぜ: 毎フレームの更新順序を 1 箇所に固定し、描画バックエンドから独立してテストできるようにするため。
"""
