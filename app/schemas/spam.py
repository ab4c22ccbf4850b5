from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class SpamReportRequest(BaseModel):
    phone_number: str = Field(alias="phoneNumber", min_length=1, max_length=20)
    country_code: Optional[str] = Field(default=None, alias="countryCode", min_length=2, max_length=2)


class SpamReportResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(alias="phoneNumber")
    spam_likelihood: int = Field(alias="spamLikelihood")
