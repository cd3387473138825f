from typing import Dict, Optional


class FormNotFoundError(Exception):
    def __init__(self, form_id: str):
        self.form_id = form_id
        super().__init__(f"Form not found: {form_id}")


class SubmissionValidationError(Exception):
    """Raised when submitted values do not satisfy the form's field definitions.

    ``errors`` maps a field id to the message shown next to that input.
    """

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message or "Submission failed validation")


class FormGenerationError(Exception):
    pass
