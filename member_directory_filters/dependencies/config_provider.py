from member_directory_filters.config.app_config import AppConfig

__app_config = None


def get_app_config() -> AppConfig:
    """Read once from the environment; every provider shares this instance."""
    global __app_config
    if __app_config is None:
        __app_config = AppConfig.from_env()
    return __app_config
