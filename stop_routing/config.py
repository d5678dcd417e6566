import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """
    Configuration class for Stop Routing.
    This class loads configuration values from environment variables or uses default values.
    """
    # General configuration
    DEBUG = os.environ.get('DEBUG', 'False') == 'True'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

    # Metric used by Stop.distance_to: "manhattan" or "euclidean"
    DISTANCE_METRIC = os.environ.get('DISTANCE_METRIC', 'manhattan').lower()

    # Refuse to transfer entries to a stop that is not a direct neighbour
    STRICT_NEIGHBOURS = os.environ.get('STRICT_NEIGHBOURS', 'True') == 'True'
