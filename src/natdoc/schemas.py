"""Schemas for JSON contract descriptions."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, StrictStr, model_validator


class ParameterSchema(BaseModel):
    name: StrictStr = ""
    type: StrictStr


class EventParameterSchema(ParameterSchema):
    indexed: StrictBool = False


class FunctionSchema(BaseModel):
    name: StrictStr
    signature: StrictStr | None = None
    constant: StrictBool = False
    documentation: StrictStr | None = None
    inputs: list[ParameterSchema] = Field(default_factory=list)
    outputs: list[ParameterSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def default_signature(self) -> FunctionSchema:
        # Canonical "name(type,...)" form
        if self.signature is None:
            self.signature = f"{self.name}({','.join(p.type for p in self.inputs)})"
        return self


class ConstructorSchema(BaseModel):
    inputs: list[ParameterSchema] = Field(default_factory=list)


class EventSchema(BaseModel):
    name: StrictStr
    anonymous: StrictBool = False
    inputs: list[EventParameterSchema] = Field(default_factory=list)


class StructSchema(BaseModel):
    name: StrictStr
    members: list[ParameterSchema] = Field(default_factory=list)


class EnumSchema(BaseModel):
    name: StrictStr
    members: list[StrictStr] = Field(default_factory=list)


class ContractSchema(BaseModel):
    name: StrictStr
    library: StrictBool = False
    documentation: StrictStr | None = None
    constructor: ConstructorSchema | None = None
    functions: list[FunctionSchema] = Field(default_factory=list)
    events: list[EventSchema] = Field(default_factory=list)
    structs: list[StructSchema] = Field(default_factory=list)
    enums: list[EnumSchema] = Field(default_factory=list)
