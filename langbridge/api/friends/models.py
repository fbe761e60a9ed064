from datetime import datetime
from typing import Annotated, List, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


ObjectIdStr = Annotated[str, BeforeValidator(str)]
RequestStatus = Literal["pending", "accepted"]


class MongoDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")


class UserSummary(MongoDocument):
    fullName: str = ""
    profilePic: str = ""
    nativeLanguage: str = ""
    learningLanguage: str = ""


class UserBrief(MongoDocument):
    fullName: str = ""
    profilePic: str = ""


class FriendRequestOut(MongoDocument):
    sender: ObjectIdStr
    recipient: ObjectIdStr
    status: RequestStatus
    createdAt: datetime
    updatedAt: datetime


class IncomingFriendRequest(FriendRequestOut):
    sender: UserSummary


class OutgoingFriendRequest(FriendRequestOut):
    recipient: UserSummary


class AcceptedFriendRequest(FriendRequestOut):
    sender: UserBrief
    recipient: UserBrief


class FriendRequests(BaseModel):
    incomingReqs: List[IncomingFriendRequest]
    acceptedReqs: List[AcceptedFriendRequest]


class Message(BaseModel):
    message: str
