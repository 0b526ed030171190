"""
Logging module for the project
"""

import logging

# Set up logging
# Change logging level to DEBUG to see per-step physics details
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("pong")
