"""Community domain exceptions."""

from myhome.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class CommunityNotFoundError(EntityNotFoundError):
    def __init__(self, community_id: str) -> None:
        self.community_id = community_id
        super().__init__(
            f"Community not found: {community_id}",
            code=ErrorCode.COMMUNITY_NOT_FOUND,
        )
