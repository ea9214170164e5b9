from .base import SubjectTheme, StatusColorTheme

THEME_REGISTRY = {
    "status": StatusColorTheme,
}
