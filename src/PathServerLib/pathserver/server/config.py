"""
Configuration module for the PathServer TCP service.
Centralizes all configuration values.
"""
import os

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "7777"))

# Request limits
READ_TIMEOUT = float(os.getenv("READ_TIMEOUT", "10"))
# Whole request frame, seconds; 0 disables
FRAME_TIMEOUT = float(os.getenv("FRAME_TIMEOUT", "30"))
MAX_EDGES = int(os.getenv("MAX_EDGES", "65535"))

# Response
# Original service wrote strlen + 1 bytes, i.e. with the trailing NUL
NUL_TERMINATOR = os.getenv("NUL_TERMINATOR", "false").lower() == "true"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
