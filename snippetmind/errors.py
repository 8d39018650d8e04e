"""
Error types shared by the pipeline and the HTTP layer
"""


class SnippetMindError(Exception):
    """Base class; status is the HTTP code the API answers with"""
    status = 500
    message = "Internal Server Error"

    def __init__(self, details=None):
        super().__init__(details or self.message)
        self.details = details


class InvalidRequest(SnippetMindError):
    """Missing or malformed input"""
    status = 400

    def __init__(self, message):
        super().__init__(None)
        self.message = message

    def __str__(self):
        return self.message


class UpstreamError(SnippetMindError):
    """The model call failed or the client is misconfigured"""


class MissingArtifactError(SnippetMindError):
    """The model answered but produced nothing usable"""
    message = "No image generated"
