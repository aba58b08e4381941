"""
どこで: `engine.render` サブパッケージ。
何を: CurveFrame → GPU 転送・描画の入口。PointRenderer/PointMesh/Shader を提供。
なぜ: 計算（shapes/runtime）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
