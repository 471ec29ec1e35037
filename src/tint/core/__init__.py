"""
どこで: `tint.core` サブパッケージ。
何を: ルールモデル・ルール照合・型解決・注釈エンジン（描画指示の組み立て）を提供。
なぜ: 分類（どのルールが一致するか）と描画（スウォッチ生成）の責務を分離するため。
"""
