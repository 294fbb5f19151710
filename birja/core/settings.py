import os
from dotenv import load_dotenv

class Settings:

    load_dotenv()

    SECRET_KEY: str = os.getenv('SECRET_KEY', 'dev-secret')
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_EXPIRE_MINUTES: int = 60 * 24 * 7

    DATABASE_URL: str | None = os.getenv('DATABASE_URL')
    DB_CREATE_ALL: bool = os.getenv('DB_CREATE_ALL', 'false').lower() in ('1', 'true', 'yes')

    REDIS_URL: str | None = os.getenv('REDIS_URL')
    REDIS_HOST: str = os.getenv('REDIS_HOST', '127.0.0.1')
    REDIS_PORT: int = int(os.getenv('REDIS_PORT', 6379))

    CF_ACCOUNT_ID: str | None = os.getenv('CF_ACCOUNT_ID')
    CF_IMAGES_TOKEN: str | None = os.getenv('CF_IMAGES_TOKEN')
    CF_IMAGES_ACCOUNT_HASH: str | None = os.getenv('CF_IMAGES_ACCOUNT_HASH')
    CF_IMAGES_VARIANT: str = os.getenv('CF_IMAGES_VARIANT', 'public')

    CORS_ORIGINS: list[str] = [
        origin.strip() for origin in os.getenv('CORS_ORIGINS', '*').split(',') if origin.strip()
    ]
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    PORT: int = int(os.getenv('PORT', 3010))

    @property
    def get_db_url(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        db_host = os.getenv('DB_HOST', 'localhost')
        db_port = int(os.getenv('DB_PORT', 5432))
        db_user = os.getenv('DB_USER', 'postgres')
        db_password = os.getenv('DB_PASSWORD', '')
        db_name = os.getenv('DB_NAME', 'birja')
        return f"postgresql+asyncpg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

    @property
    def get_redis_url(self):
        if self.REDIS_URL:
            return self.REDIS_URL
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/0"


settings = Settings()
