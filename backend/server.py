import os
import uvicorn

if __name__ == "__main__":
    from config import settings

    # アプリケーションデータディレクトリの確保
    os.makedirs(settings.USER_DATA_DIR, exist_ok=True)

    from main import app

    # ポート番号 (環境変数 SETLIST_PORT、デフォルトは 5000)
    port = settings.SETLIST_PORT

    print(f"Starting Setlist Backend Server on port {port}...")
    print(f"User Data Directory: {settings.USER_DATA_DIR}")
    print(f"Database: {settings.DATABASE_URL}")

    uvicorn.run(app, host="127.0.0.1", port=port, reload=False, workers=1)
