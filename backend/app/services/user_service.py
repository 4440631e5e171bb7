"""AssetTrack — UserService: user directory."""
from app.repositories.user_repository import UserRepository
from app.schemas.common import Result
from app.schemas.user import UserRead
from app.services.base import as_result


class UserService:
    """Read-only view of application users. Password hashes never leave the repository."""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    @as_result("get users")
    async def get_all(self) -> Result[list[UserRead]]:
        rows = await self.repo.list_all()
        return Result.ok([UserRead.model_validate(r) for r in rows])
