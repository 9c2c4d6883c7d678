import logging

SERVICE_NAME = "notification_service"

# Listener is fixed; nothing here is read from the environment.
HOST = "0.0.0.0"
PORT = 8080

LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
