import os
import json
from pathlib import Path
from dotenv import load_dotenv
from .logging_config import setup_app_logging
import logging

# Load environment variables from .env file
load_dotenv()

# Get the config directory path (where this file is located)
CONFIG_DIR = Path(__file__).parent

PROJECT_ROOT = CONFIG_DIR.parent

# Load configuration from config.json
config_path = CONFIG_DIR / 'config.json'
with open(config_path, 'r', encoding='utf-8') as f:
    CONFIG = json.load(f)

CONFIG['project_root'] = str(PROJECT_ROOT)

# --- System Prompt Loading ---
study_assistant_prompt_path = CONFIG_DIR / 'study_assistant_system_prompt.txt'
try:
    with open(study_assistant_prompt_path, 'r', encoding='utf-8') as f:
        CONFIG['study_assistant_message'] = f.read().strip()
except FileNotFoundError:
    raise FileNotFoundError(
        f"Study assistant system prompt file not found: {study_assistant_prompt_path}\n"
        f"Please ensure study_assistant_system_prompt.txt exists in the config directory."
    )


def validate_config():
    """Validate that the required configuration sections are present.

    API keys are not checked here. The llm backend validates its credential when
    the client is built (see llm_cloud/provider.py), so the rule-based backend
    runs without any secrets configured.
    """
    required_sections = ['assistant', 'chat', 'llm']
    for section in required_sections:
        if section not in CONFIG:
            raise ValueError(f"Missing configuration section: {section}")

    required_models = ['study_assistant']
    for model in required_models:
        if model not in CONFIG['llm'].get('models', {}):
            raise ValueError(f"Missing configuration for LLM model: {model}")

# Validate configuration on module import
validate_config()

# --- Helper function to get config value from CONFIG or environment variable ---
def get_config_value(json_keys: list, env_var_name: str, default_value: any = None):
    """
    Retrieves a configuration value.
    Priority:
    1. Environment variable (if env_var_name is provided and variable is set).
    2. Value from CONFIG dictionary (using json_keys).
    3. default_value.
    """
    if env_var_name:
        env_value = os.getenv(env_var_name)
        if env_value is not None:
            # Attempt to match type of default_value if it's int or bool
            if isinstance(default_value, bool):
                if env_value.lower() == 'true': return True
                if env_value.lower() == 'false': return False
            elif isinstance(default_value, int):
                try:
                    return int(env_value)
                except ValueError:
                    pass # Fall through to JSON or default if not a valid int
            return env_value

    current_level = CONFIG
    try:
        for key in json_keys:
            current_level = current_level[key]
        if isinstance(default_value, bool) and isinstance(current_level, bool):
            return current_level
        if isinstance(default_value, int) and isinstance(current_level, int):
            return current_level
        if isinstance(current_level, (str, int, bool, float, list, dict)):
             return current_level
    except (KeyError, TypeError):
        pass # Key not found or CONFIG structure not as expected, fall through to default

    return default_value

# --- Assistant / chat settings (env overrides win over config.json) ---
CONFIG['assistant']['backend'] = get_config_value(['assistant', 'backend'], 'ASSISTANT_BACKEND', 'rule_based')
CONFIG['chat']['reply_delay_ms'] = get_config_value(['chat', 'reply_delay_ms'], 'REPLY_DELAY_MS', 450)
CONFIG['llm']['provider'] = get_config_value(['llm', 'provider'], 'LLM_PROVIDER', 'openai')

# --- Logging Configuration ---
CONFIG['logging'] = {
    'level': get_config_value(['logging', 'level'], 'LOG_LEVEL', 'INFO'),
    'file_path': get_config_value(['logging', 'file_path'], 'LOG_FILE_PATH', 'logs/study_assistant.log'),
    'max_bytes': get_config_value(['logging', 'max_bytes'], 'LOG_MAX_BYTES', 5*1024*1024), # 5MB
    'backup_count': get_config_value(['logging', 'backup_count'], 'LOG_BACKUP_COUNT', 3),
    'format': get_config_value(
        ['logging', 'format'],
        'LOG_FORMAT',
        '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'
    ),
    'date_format': get_config_value(
        ['logging', 'date_format'],
        'LOG_DATE_FORMAT',
        '%Y-%m-%d %H:%M:%S'
    )
}

# --- Setup Application Logging ---
setup_app_logging(config=CONFIG.get('logging'))

config_init_logger = logging.getLogger(__name__)
config_init_logger.info("[config_init] Logging initialized, assistant backend: %s\n", CONFIG['assistant']['backend'])
