from loguru import logger

# Library code stays quiet until an application opts in (see logsetup.setup_logger).
logger.disable("songbook")
