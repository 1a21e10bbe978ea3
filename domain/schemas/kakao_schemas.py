"""Pydantic schemas for the chat platform webhook envelope."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class KakaoUser(BaseModel):
    id: str
    properties: Dict[str, Any] = {}


class KakaoUserRequest(BaseModel):
    utterance: str = ""
    user: KakaoUser


class KakaoBot(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class KakaoAction(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    params: Dict[str, Any] = {}


class KakaoRequest(BaseModel):
    """Skill request sent by the chat platform."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_request: KakaoUserRequest = Field(alias="userRequest")
    bot: Optional[KakaoBot] = None
    action: Optional[KakaoAction] = None

    @property
    def user_id(self) -> str:
        return self.user_request.user.id

    @property
    def utterance(self) -> str:
        return self.user_request.utterance


class SimpleTextContent(BaseModel):
    text: str


class SimpleText(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    simple_text: SimpleTextContent = Field(alias="simpleText")


class Template(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    outputs: List[SimpleText] = []
    quick_replies: List[Dict[str, Any]] = Field(default_factory=list, alias="quickReplies")


class KakaoResponse(BaseModel):
    """Skill response rendered by the chat platform."""

    version: str = "2.0"
    template: Template

    @classmethod
    def simple_text(cls, text: str) -> "KakaoResponse":
        """Build a response with a single simple-text bubble."""
        return cls(
            template=Template(
                outputs=[SimpleText(simple_text=SimpleTextContent(text=text))]
            )
        )

    def to_payload(self) -> dict:
        """Serialize using the platform's camelCase field names."""
        return self.model_dump(by_alias=True)
