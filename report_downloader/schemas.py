from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ClientResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_id: str = Field(alias="clientId")


class InstanceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    instance_id: str = Field(alias="instanceId")


class DocumentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId")


class InstanceRequest(BaseModel):
    report: str


class DocumentRequest(BaseModel):
    format: Literal["PDF"] = "PDF"
