import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "meme-editor-insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "meme_editor",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
]

ROOT_URLCONF = "meme_site.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {}

STATIC_URL = "static/"
STATICFILES_DIRS = [BASE_DIR / "static"] if (BASE_DIR / "static").is_dir() else []

DATA_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024

MEME_EDITOR = {
    "IMAGE_DIR": os.environ.get("MEME_IMAGE_DIR", BASE_DIR / "static" / "img"),
    "FONT_DIRS": [BASE_DIR / "static" / "fonts"],
    "STRICT_FONTS": False,
    "FONT_FAMILY": "HelveticaNeue-CondensedBlack",
    "FONT_SIZE": 40,
    "STROKE_WIDTH": -3.0,
    "NAV_BAR_HEIGHT": 44,
    "TOOL_BAR_HEIGHT": 44,
    "MAX_CANVAS_PIXELS": 40_000_000,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s [%(name)s] %(levelname)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "meme_editor": {
            "handlers": ["console"],
            "level": os.environ.get("MEME_LOG_LEVEL", "INFO"),
        },
    },
}
