"""Error codes and user-friendly messages.

This module defines the error catalog for the directory API.
Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "SUB_001": {
        "code": "SUB_001",
        "message": "Submission is missing required fields",
        "user_message": "Some required fields are missing.",
        "suggestion": "Fill in the highlighted fields and submit again.",
        "retry_allowed": True,
    },
    "SUB_002": {
        "code": "SUB_002",
        "message": "Backlink verification is required for free submissions",
        "user_message": "Please verify the Open Source Finder badge in your README.",
        "suggestion": "Add the badge to your README, verify it, or switch to the sponsor plan.",
        "retry_allowed": True,
    },
    "SUB_003": {
        "code": "SUB_003",
        "message": "Payment confirmation is required for sponsor submissions",
        "user_message": "Payment is required for sponsor submissions.",
        "suggestion": "Complete the payment, or switch to the free plan.",
        "retry_allowed": True,
    },
    "SUB_004": {
        "code": "SUB_004",
        "message": "Submission collides with an existing alternative",
        "user_message": "This project is already listed.",
        "suggestion": "If you maintain it, claim the existing listing instead.",
        "retry_allowed": False,
    },
    "CLAIM_001": {
        "code": "CLAIM_001",
        "message": "Claim target not found",
        "user_message": "This project is not in our database.",
        "suggestion": "Submit it as a new alternative instead.",
        "retry_allowed": False,
    },
    "CLAIM_002": {
        "code": "CLAIM_002",
        "message": "Claim target already owned by the caller",
        "user_message": "You already own this project.",
        "suggestion": "Manage it from your dashboard.",
        "retry_allowed": False,
    },
    "CLAIM_003": {
        "code": "CLAIM_003",
        "message": "Claim target already owned by another user",
        "user_message": "This project is already claimed by another user.",
        "suggestion": "Contact support if you believe this is a mistake.",
        "retry_allowed": False,
    },
    "CLAIM_004": {
        "code": "CLAIM_004",
        "message": "Claim verification file missing or content mismatch",
        "user_message": "We couldn't find the verification file in your repository.",
        "suggestion": "Commit the file to the main or master branch root and try again.",
        "retry_allowed": True,
    },
    "GH_001": {
        "code": "GH_001",
        "message": "Invalid GitHub repository URL",
        "user_message": "That doesn't look like a GitHub repository URL.",
        "suggestion": "Use a URL like https://github.com/owner/repo.",
        "retry_allowed": True,
    },
    "API_001": {
        "code": "API_001",
        "message": "Resource not found",
        "user_message": "We couldn't find what you were looking for.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred",
        "suggestion": "Please try again later",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists",
        "user_message": "This record already exists",
        "suggestion": "Please check if the record was already created",
        "retry_allowed": False,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Unexpected server error",
        "user_message": "Something went wrong on our side.",
        "suggestion": "Please try again. Contact support if the problem persists.",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details (a generic entry for unknown codes)
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
