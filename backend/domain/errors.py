class SetlistError(Exception):
    """
    ドメインルール違反の基底例外。
    アプリケーションサービスの境界で status_code 付きのエラーレスポンスに変換される。
    """
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class NotFoundError(SetlistError):
    """参照先 (Set / Song / Gig / セット内の曲) が存在しない"""
    status_code = 404

class ConflictError(SetlistError):
    """重複登録や使用中の曲の削除など、ドメインルールに反する操作"""
    status_code = 400
