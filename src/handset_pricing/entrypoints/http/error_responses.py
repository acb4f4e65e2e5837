"""REST API error response models.

Every error response shares one shape so clients can switch on `code`.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation failure."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "installment_months",
                "message": "Must be one of [0, 12, 24, 36]",
                "code": "INVALID_INSTALLMENT_MONTHS",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Combination missing from the subsidy table:
            {
                "detail": "Combination unavailable: device 'galaxy-s24-256gb', plan 'lte-basic', join type 'new'",
                "code": "NOT_FOUND"
            }

        Catalog that failed its integrity checks:
            {
                "detail": "Catalog failed integrity checks",
                "code": "DATA_INTEGRITY_ERROR",
                "problems": ["subsidy table 'transfer' is missing"]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    problems: list[str] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Device with identifier 'unknown' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "installment_months",
                            "message": "Must be one of [0, 12, 24, 36]",
                            "code": "INVALID_INSTALLMENT_MONTHS",
                        },
                        {
                            "field": "contract_type",
                            "message": "Must be one of ['subsidy_discount', 'selective_contract']",
                            "code": "INVALID_CONTRACT_TYPE",
                        },
                    ],
                },
            ]
        }
    )
