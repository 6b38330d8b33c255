from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    APP_ENV: str = "development"
    CORS_ORIGINS: str = "http://localhost:3000"

    # Telegram bot
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_CHAT_ID: str = ""

    # Operator's own address: recipient of every notification, and the SMTP login
    EMAIL_ADDRESS: str = ""

    # Resend (takes precedence over SMTP when set)
    RESEND_API_KEY: str = ""
    RESEND_API_URL: str = "https://api.resend.com/emails"
    RESEND_FROM: str = "Portfolio <onboarding@resend.dev>"

    # SMTP relay
    GMAIL_PASSKEY: str = ""
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
