from enum import Enum

class ReadinessStatus(str, Enum):
    """曲の練習状況"""
    READY = "Ready"
    IN_PROGRESS = "InProgress"
    WISH_LIST = "WishList"

# 文字列長の上限 (スキーマと入力バリデーションで共有)
NAME_MAX_LENGTH = 200
VENUE_MAX_LENGTH = 200
NOTES_MAX_LENGTH = 1000

# セット内の曲順は 1 始まり
FIRST_ORDER = 1
