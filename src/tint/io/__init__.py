"""
どこで: `tint.io` サブパッケージ。
何を: ルール集合とエンジン設定の JSON 保存/復元。
なぜ: コアはストレージに触れないため、永続化は隣接モジュールとして独立させる。
"""
