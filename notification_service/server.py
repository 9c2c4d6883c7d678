import uvicorn
from notification_service.config import HOST, PORT


def run():
    """Serve the application on the fixed listener.

    uvicorn exits the process with status 1 when the port cannot be bound;
    that failure is not retried.
    """
    uvicorn.run("notification_service.main:app", host=HOST, port=PORT)
