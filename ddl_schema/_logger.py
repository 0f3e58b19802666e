"""
Logging module for the DDL parser diagnostics

Classes
-------
- `LogLevel` : Log level
- `ParseStage` : Stage of the parsing the log record belongs to
- `LogRecord` : A log record kept in memory
- `Logger` : Logger

Constants
---------
- `MAX_LOG_LEVEL_LENGTH` : Maximum length of the log level names
- `MAX_STAGE_LENGTH` : Maximum length of the parse stage names
"""
from dataclasses import dataclass
import datetime
from enum import Enum, auto
from os import path, makedirs
from typing import Optional



class LogLevel(Enum):
    """Log level"""
    INFO = 1
    WARNING = 2
    ERROR = 3
MAX_LOG_LEVEL_LENGTH = max([len(s.name) for s in LogLevel])

class ParseStage(Enum):
    """Stage of the parsing the log record belongs to"""
    # Splitting the input into statements
    SPLITTING = auto()
    # CREATE TABLE statement
    CREATE_TABLE = auto()
    # ALTER TABLE statement
    ALTER_TABLE = auto()
    # Other statements
    UNSUPPORTED = auto()
MAX_STAGE_LENGTH = max([len(s.name) for s in ParseStage])

@dataclass(frozen=True)
class LogRecord:
    """A log record kept in memory"""
    level: LogLevel
    stage: ParseStage
    message: str



class Logger:
    """Logger"""
    def __init__(self, min_level:LogLevel=LogLevel.INFO):
        """Initialize the logger

        Only in-memory records are kept until `init_logger` is called.

        Parameters
        ----------
        min_level : LogLevel, default LogLevel.INFO
            Records below this level are dropped
        """
        self._path: Optional[str] = None
        self._encoding = "utf-8"
        self._logging_to_console = False
        self.min_level = min_level
        """Records below this level are dropped"""
        self.records: list[LogRecord] = []
        """Records emitted since the creation or the last `clear()`
        (grows with every record; call `clear()` when reusing the logger)"""

    def clear(self) -> None:
        """Discard the in-memory records (the log file is kept)"""
        self.records.clear()

    def init_logger(self, log_path:Optional[str], encoding:str="utf-8",
                    init_log:bool=False, logging_to_console:bool=False) -> bool:
        """Initialize the log file

        Parameters
        ----------
        log_path : str | None
            Path of the log file (None: no file output)
        encoding : str, default "utf-8"
            Encoding of the log file
        init_log : bool, default False
            Truncate the log file
        logging_to_console : bool, default False
            Also print the log to the console

        Returns
        -------
        bool
            True if the log file can be used
        """
        self._encoding = encoding
        self._logging_to_console = logging_to_console

        if log_path is None:
            self._path = None
            return True

        try:
            # Create the directory of the log file if it does not exist
            if (log_dir := path.dirname(log_path)) and not path.exists(log_dir):
                makedirs(log_dir)
            if init_log and path.exists(log_path):
                with open(log_path, "w", encoding=encoding) as f:
                    f.write("")
        except OSError:
            self._path = None
            return False

        self._path = log_path
        return True

    @property
    def log_path(self) -> Optional[str]:
        """Path of the log file"""
        return self._path

    def format(self, stage:ParseStage, message:str, level:LogLevel) -> str:
        """Format a log line"""
        return (f"[{level.name}]".ljust(MAX_LOG_LEVEL_LENGTH+3)
                + f"{datetime.datetime.now().strftime('%Y/%m/%d %H:%M:%S')}, "
                + f"{stage.name},".ljust(MAX_STAGE_LENGTH+2)
                + message)

    def log(self, stage:ParseStage, message:str,
            level:LogLevel=LogLevel.INFO) -> bool:
        """Output a log

        Parameters
        ----------
        stage : ParseStage
            Parse stage
        message : str
            Log message
        level : LogLevel, default LogLevel.INFO
            Log level

        Returns
        -------
        bool
            False if the record was dropped or could not be written to the file
        """
        if level.value < self.min_level.value:
            return False

        self.records.append(LogRecord(level, stage, message))
        text = self.format(stage, message, level)

        if self._logging_to_console:
            print(text)

        if self._path is None:
            return True

        try:
            with open(self._path, "a", encoding=self._encoding) as f:
                f.write(text + "\n")
        except OSError:
            return False

        return True

    def info(self, stage:ParseStage, message:str) -> bool:
        """Output an INFO log"""
        return self.log(stage, message, LogLevel.INFO)

    def warning(self, stage:ParseStage, message:str) -> bool:
        """Output a WARNING log"""
        return self.log(stage, message, LogLevel.WARNING)

    def error(self, stage:ParseStage, message:str) -> bool:
        """Output an ERROR log"""
        return self.log(stage, message, LogLevel.ERROR)
