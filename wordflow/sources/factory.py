from wordflow.config import EngineConfig
from wordflow.sources.adapters import FileWordSource, UrlWordSource
from wordflow.sources.base import WordSource

def create_source(config: EngineConfig) -> WordSource | None:
    """
    Picks the word source named by the config. A local file wins over a URL;
    with neither, the engine runs on its fallback list.
    """
    if config.word_list_path:
        return FileWordSource(config.word_list_path)
    elif config.word_list_url:
        return UrlWordSource(config.word_list_url, timeout=config.request_timeout)
    else:
        return None
