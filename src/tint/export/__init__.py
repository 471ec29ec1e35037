"""
どこで: `tint.export` サブパッケージ。
何を: 生成済みスウォッチの画像書き出し。
"""
