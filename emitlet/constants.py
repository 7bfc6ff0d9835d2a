# Reserved event type; handlers registered under it receive every emission.
WILDCARD = "*"

CONSOLE_LOG_FORMAT = "%(levelname)s %(message)s"
FILE_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"
FILE_LOG_DATE_FORMAT = "%d.%m.%Y %H:%M:%S"
FILE_LOG_MAX_BYTES = 10 * 1024**2
FILE_LOG_BACKUP_COUNT = 5
