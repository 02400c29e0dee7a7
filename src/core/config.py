import os
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class QuizSettings(BaseSettings):
    data_dir: str = "assets/assessment-data"  # quizzes.yml + <quiz_id>.yml
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix='QUIZ_')


# Instantiate settings
quiz_settings = QuizSettings()
