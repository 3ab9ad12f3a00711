from supatools.models.invites import InviteCode
from supatools.models.profiles import UserProfile


__all__ = ["InviteCode", "UserProfile"]
