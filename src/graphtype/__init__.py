from graphtype.logger import get_logger

__author__ = """graphtype contributors"""
__version__ = "0.3.0"

log = get_logger("graphtype")
