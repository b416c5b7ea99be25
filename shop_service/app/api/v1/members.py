"""Member API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, status

from ...models.base import Address
from ...models.member import Member
from ...schemas.member import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    MemberEntity,
    MemberListResponse,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from ...services.member_service import MemberService
from ...utils.logging import setup_shop_logging as setup_logging
from ..dependencies import CorrelationIdDep, MemberServiceDep

logger = setup_logging("shop_service.members_api")
router = APIRouter()


@router.post(
    "/api/v1/members",
    response_model=CreateMemberResponse,
    status_code=status.HTTP_200_OK,
)
async def save_member_v1(
    member_data: MemberEntity,
    correlation_id: Optional[str] = CorrelationIdDep,
    member_service: MemberService = MemberServiceDep,
) -> CreateMemberResponse:
    """Register a member from an entity-shaped body"""
    address = member_data.address
    member = Member(name=member_data.name)
    if address is not None:
        member.address = Address(address.city, address.street, address.zipcode)

    member_id = await member_service.join(member)
    logger.info(
        "Member registered via v1",
        extra={"member_id": member_id, "correlation_id": correlation_id},
    )
    return CreateMemberResponse(id=member_id)


@router.post(
    "/api/v2/members",
    response_model=CreateMemberResponse,
    status_code=status.HTTP_200_OK,
)
async def save_member_v2(
    request_data: CreateMemberRequest,
    correlation_id: Optional[str] = CorrelationIdDep,
    member_service: MemberService = MemberServiceDep,
) -> CreateMemberResponse:
    """Register a member from a dedicated request body"""
    member_id = await member_service.join(Member(name=request_data.name))
    logger.info(
        "Member registered via v2",
        extra={"member_id": member_id, "correlation_id": correlation_id},
    )
    return CreateMemberResponse(id=member_id)


@router.put("/api/v2/members/{member_id}", response_model=UpdateMemberResponse)
async def update_member_v2(
    member_id: int,
    request_data: UpdateMemberRequest,
    member_service: MemberService = MemberServiceDep,
) -> UpdateMemberResponse:
    """Rename a member"""
    member = await member_service.update(member_id, request_data.name)
    return UpdateMemberResponse(id=member.id, name=member.name)


@router.get("/api/v1/members", response_model=List[MemberEntity])
async def members_v1(
    member_service: MemberService = MemberServiceDep,
) -> List[MemberEntity]:
    """List members in their entity shape"""
    members = await member_service.find_members()
    return [MemberEntity.model_validate(member) for member in members]


@router.get("/api/v2/members", response_model=MemberListResponse)
async def members_v2(
    member_service: MemberService = MemberServiceDep,
) -> MemberListResponse:
    """List member names wrapped in a result object"""
    members = await member_service.find_members()
    data = [MemberDto(name=member.name) for member in members]
    return MemberListResponse(count=len(data), data=data)
