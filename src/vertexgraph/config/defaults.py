from dynaconf import Dynaconf

DEFAULTS = {
    # Vertex property read by the default identity function
    "ID_KEY": "id",
}

settings = Dynaconf(
    envvar_prefix="VERTEXGRAPH",
    load_dotenv=True,
    settings_files=[],
)


def default_id_key() -> str:
    return settings.get("ID_KEY", DEFAULTS["ID_KEY"])
