from typing import Dict, List

from pydantic import BaseModel

from apps.event_contracts.services.contracts.registry import Contract
from apps.event_contracts.services.contracts.validator import ValidationResult


class ContractOut(BaseModel):
    event_type: str
    fields: Dict[str, str]

    @classmethod
    def from_contract(cls, contract: Contract) -> "ContractOut":
        return cls(**contract.to_dict())


class TypeMismatchOut(BaseModel):
    field: str
    expected: str
    actual: str


class ValidationResultOut(BaseModel):
    eventType: str
    missingFields: List[str]
    typeMismatches: List[TypeMismatchOut]
    unexpectedFields: List[str]
    isValid: bool

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResultOut":
        return cls(**result.to_dict())
