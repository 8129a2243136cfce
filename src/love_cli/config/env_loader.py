"""
.env file loading for Love CLI.

Searches the working directory and its parents for a .env file so the
LOVE_* variables can live next to a project instead of in the shell.
"""

from pathlib import Path
from typing import Optional, Dict
import logging

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)

EXAMPLE_ENV_CONTENT = '''# Love CLI Configuration
# Lines starting with # are comments and will be ignored.

# Required: API key from the Admin section of your Love instance
LOVE_API_KEY=your-api-key-here

# Required: API root, including the "api" part and no trailing slash
LOVE_BASE_URL=https://cwrulove.appspot.com/api

# Required for 'love send': the username love is sent from
LOVE_SENDER=your-username

# Optional
LOVE_TIMEOUT=30
LOVE_DEFAULT_LIMIT=20
LOVE_LOG_LEVEL=WARNING
'''


class EnvFileLoader:
    """
    .env file loader with hierarchical search.

    Search order (stops at first file found):
    1. Current directory: .love/.env → .env
    2. Parent directories (up to git root or home): .love/.env → .env
    3. Home directory: ~/.love/.env → ~/.env
    """

    CONFIG_DIR_NAME = ".love"
    ENV_FILE_NAME = ".env"

    def __init__(self, working_directory: Optional[Path] = None, home_directory: Optional[Path] = None):
        """Initialize env file loader.

        Args:
            working_directory: Starting directory for search
            home_directory: Home directory used as the last fallback
        """
        self.working_directory = Path(working_directory or Path.cwd()).resolve()
        self.home_directory = Path(home_directory or Path.home()).resolve()
        self._loaded_file: Optional[Path] = None
        self._loaded_vars: Dict[str, str] = {}

    def load_env_file(self, env_file: Optional[Path] = None) -> Optional[Path]:
        """Load environment variables from a .env file.

        Variables already present in the environment are not overridden.

        Args:
            env_file: Explicit file to load instead of searching

        Returns:
            Path to loaded .env file or None if none found

        Raises:
            FileNotFoundError: If an explicit env_file does not exist
        """
        if env_file:
            env_file_path = Path(env_file)
            if not env_file_path.is_file():
                raise FileNotFoundError(f".env file not found: {env_file_path}")
        else:
            env_file_path = self._find_env_file()

        if env_file_path is None:
            logger.debug("No .env file found in search path")
            return None

        load_dotenv(env_file_path, override=False)
        self._loaded_file = env_file_path
        self._loaded_vars = {
            key: value for key, value in dotenv_values(env_file_path).items() if value is not None
        }
        logger.info(f"Loaded environment variables from: {env_file_path}")
        return env_file_path

    def get_loaded_file(self) -> Optional[Path]:
        """Get path to the loaded .env file."""
        return self._loaded_file

    def get_loaded_vars(self) -> Dict[str, str]:
        """Get variables loaded from .env file."""
        return self._loaded_vars.copy()

    def _find_env_file(self) -> Optional[Path]:
        """Find the first .env file in the search hierarchy."""
        current_dir = self.working_directory

        while True:
            found = self._env_file_in(current_dir)
            if found:
                return found

            if self._should_stop_search(current_dir) or current_dir == current_dir.parent:
                break

            current_dir = current_dir.parent

        return self._env_file_in(self.home_directory)

    def _env_file_in(self, directory: Path) -> Optional[Path]:
        # .love/.env is preferred over a bare .env
        for candidate in (
            directory / self.CONFIG_DIR_NAME / self.ENV_FILE_NAME,
            directory / self.ENV_FILE_NAME,
        ):
            if candidate.is_file():
                return candidate
        return None

    def _should_stop_search(self, directory: Path) -> bool:
        """Stop at a git repository root or the home directory."""
        return (directory / ".git").exists() or directory == self.home_directory

    def create_example_env_file(self, target_dir: Optional[Path] = None) -> Path:
        """Create an example .env file.

        Args:
            target_dir: Directory to create file in (default: .love in the
                working directory)

        Returns:
            Path to created example file

        Raises:
            FileExistsError: If the target file already exists
        """
        if target_dir is None:
            target_dir = self.working_directory / self.CONFIG_DIR_NAME

        target_dir.mkdir(parents=True, exist_ok=True)
        env_file_path = target_dir / self.ENV_FILE_NAME
        if env_file_path.exists():
            raise FileExistsError(f"{env_file_path} already exists")

        env_file_path.write_text(EXAMPLE_ENV_CONTENT, encoding="utf-8")
        logger.info(f"Created example .env file: {env_file_path}")
        return env_file_path
