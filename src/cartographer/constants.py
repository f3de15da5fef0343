APP_NAME = "cartographer"
ENV_PREFIX = "CARTOGRAPHER_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG_PATH"
DEFAULT_CONFIG_FILENAME = "local.cartographer.json"
