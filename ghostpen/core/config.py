import os

GHOSTPEN_HOME = os.getenv("GHOSTPEN_HOME", os.path.join(os.path.expanduser("~"), ".ghostpen"))
GHOSTPEN_LOG_DIR = os.getenv("GHOSTPEN_LOG_DIR", os.path.join(GHOSTPEN_HOME, "logs"))

MAX_REQUEST_BYTES = int(os.getenv("MAX_REQUEST_BYTES", 2 * 1024 * 1024))  # 2 MB of text is plenty

# Grammar checker
GHOSTPEN_LANGUAGE = os.getenv("GHOSTPEN_LANGUAGE", "en-US")
MAX_SUGGESTIONS = int(os.getenv("MAX_SUGGESTIONS", 5))

# Local LLM servers. 127.0.0.1 rather than localhost: Windows may resolve
# localhost to ::1 while LM Studio / Ollama only bind IPv4.
LMSTUDIO_URL = os.getenv("LMSTUDIO_URL", "http://127.0.0.1:1234")
OLLAMA_URL = os.getenv("OLLAMA_URL", "http://127.0.0.1:11434")
LMSTUDIO_MODEL = os.getenv("LMSTUDIO_MODEL", "default")  # whatever model is loaded
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "qwen2.5:3b")
LOCAL_API_KEY = os.getenv("LOCAL_API_KEY", "not-needed")

PROBE_TIMEOUT = float(os.getenv("PROBE_TIMEOUT", 2.0))          # seconds
COMPLETION_TIMEOUT = float(os.getenv("COMPLETION_TIMEOUT", 180.0))  # local inference can be slow
REWRITE_TEMPERATURE = float(os.getenv("REWRITE_TEMPERATURE", 0.3))
