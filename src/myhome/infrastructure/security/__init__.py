from myhome.infrastructure.security.community_admin_lookup import (
    SessionScopedCommunityAdminLookup,
)

__all__ = ["SessionScopedCommunityAdminLookup"]
