"""
Event logging for the strength meter front ends.

Only the category and the password length are ever recorded.
"""

import logging
from typing import Optional

class MeterLogger:
    """Log meter-relevant events."""
    
    def __init__(self, log_file: Optional[str] = None):
        self.logger = logging.getLogger('passmeter')
        self.logger.setLevel(logging.INFO)
        
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())
        
        if log_file:
            self.add_log_file(log_file)
    
    def add_log_file(self, log_file: str) -> None:
        """Attach a file handler writing to ``log_file``."""
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.INFO)
        
        # Formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        fh.setFormatter(formatter)
        
        self.logger.addHandler(fh)
    
    def close(self) -> None:
        """Detach and close every file handler."""
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self.logger.removeHandler(handler)
                handler.close()
    
    def log_evaluation(self, category: str, length: int, custom: bool = False):
        """Log a front-end evaluation."""
        mode = "custom" if custom else "default"
        self.logger.info(f"Evaluated {length}-character password ({mode} rules) - {category or 'Empty'}")
    
    def log_config_loaded(self, path: str):
        """Log a configuration file load."""
        self.logger.info(f"Configuration loaded from {path}")
    
    def log_clipboard_read(self, success: bool):
        """Log clipboard access."""
        status = "SUCCESS" if success else "FAILED"
        self.logger.info(f"Clipboard read - {status}")
    
    def log_config_error(self, error: str):
        """Log rejected configuration."""
        self.logger.warning(f"Configuration error: {error}")

# Global logger instance
meter_logger = MeterLogger()
