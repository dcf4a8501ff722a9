class TemplateClientError(Exception):
    pass


class RequestError(TemplateClientError):
    pass


class UnexpectedStatusError(TemplateClientError):
    def __init__(self, operation: str, status_code: int):
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"{operation} - Unknown status code received: {status_code}")
