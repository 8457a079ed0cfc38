# contacts_client/exceptions.py

class ContactsClientError(Exception):
    """Base exception for contacts API client errors."""
    def __init__(self, message="An error occurred with the contacts API", status_code=None, original_exception=None):
        self.status_code = status_code
        self.original_exception = original_exception
        # Attempt to get more details from original exception if available
        details = ""
        if original_exception is not None:
            response = getattr(original_exception, 'response', None)
            if response is not None:
                details = f" - Response: {response.text}"

        full_message = f"{message}{details}"
        super().__init__(full_message)

class ContactsRequestError(ContactsClientError):
    """Raised when a request never got an HTTP response (connection error, timeout, ...)."""
    def __init__(self, message="Contacts API request failed without a response", status_code=None, original_exception=None):
        super().__init__(message, status_code, original_exception)
