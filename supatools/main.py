from fastapi import FastAPI

from supatools.api import users
from supatools.configs.logging import configure_logging
from supatools.configs.settings import HandlerSettings
from supatools.middleware.logging import log_middleware


_settings = HandlerSettings()
configure_logging(_settings.log_level, _settings.log_file)

# Создаём приложение FastAPI
app = FastAPI(title="User name lookup", version="0.1.0")

app.middleware("http")(log_middleware)

app.include_router(users.router)
