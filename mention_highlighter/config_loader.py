from pathlib import Path

from dynaconf import Dynaconf

# Resolved relative to the package, not the working directory
DEFAULT_CONFIG_FILE = Path(__file__).parent / "config.yaml"


def load_settings() -> Dynaconf:
    """
    Build a settings object from the packaged config.yaml.

    Environment variables of the form MENTIONS_KEY_NAME replace file values;
    lists are not merged, so MENTIONS_KNOWN_USERNAMES='["a","b"]' yields ["a", "b"].
    """
    return Dynaconf(
        settings_files=[str(DEFAULT_CONFIG_FILE)],
        environments=False,
        load_dotenv=True,
        merge_enabled=False,
        envvar_prefix="MENTIONS",
    )


settings = load_settings()
