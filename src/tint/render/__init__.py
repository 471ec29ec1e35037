"""
どこで: `tint.render` サブパッケージ。
何を: 色の合成（単色/ブロック/グラデーション）、反対色の選択、スウォッチキャッシュ。
なぜ: 純粋なピクセル生成とキャッシュを core から切り離し、単体で検証可能にするため。
"""
