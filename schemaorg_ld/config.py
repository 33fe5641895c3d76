# schemaorg_ld/config.py
import os

# BeautifulSoup tree builder used to load HTML documents.
HTML_PARSER = os.environ.get("SCHEMAORG_LD_HTML_PARSER", "lxml")

# logging (CLI only; the library never installs handlers)
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
