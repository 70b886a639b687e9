import json
import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_EXPORT_PATH = os.path.join("data", "catalog.duckdb")

# setting name -> environment variable
ENV_VARS = {
    "catalog_file": "COURSE_CATALOG_FILE",
    "export_path": "COURSE_CATALOG_EXPORT",
    "log_level": "COURSE_CATALOG_LOG_LEVEL",
}


class Settings:
    def __init__(self, catalog_file=None, export_path=DEFAULT_EXPORT_PATH, log_level="WARNING"):
        self.catalog_file = catalog_file
        self.export_path = export_path
        self.log_level = log_level

    def __repr__(self):
        return (f"Settings(catalog_file={self.catalog_file!r}, export_path={self.export_path!r}, "
                f"log_level={self.log_level!r})")


def load_config(path=None, env=None):
    """Build Settings from defaults, then a JSON file, then the environment.

    ``env`` defaults to os.environ after loading a .env file from the
    working directory.
    """
    settings = Settings()

    if path:
        with open(path) as f:
            data = json.load(f)
        for key in ENV_VARS:
            if data.get(key) is not None:
                setattr(settings, key, data[key])

    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ
    for key, var in ENV_VARS.items():
        value = env.get(var)
        if value:
            setattr(settings, key, value)

    settings.log_level = str(settings.log_level).upper()
    return settings
