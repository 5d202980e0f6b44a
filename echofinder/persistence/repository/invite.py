"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from echofinder.domain.error import ConflictError
from echofinder.domain.model import Invite
from echofinder.domain.repository import InviteRepository
from echofinder.domain.value import InviteId, TokenHash, UserId
from echofinder.persistence.mappers import invite_to_dict, row_to_invite
from echofinder.persistence.tables import invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_token_hash(self, token_hash: TokenHash) -> Optional[Invite]:
        """Find an invite by the hash of its token."""
        stmt = select(invites_table).where(
            invites_table.c.token_hash == token_hash.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Raises:
            ConflictError: If the token hash is already taken
        """
        invite_dict = invite_to_dict(invite)

        existing = await self.find_by_id(invite.id)

        if existing:
            stmt = (
                update(invites_table)
                .where(invites_table.c.id == invite.id)
                .values(**invite_dict)
            )
        else:
            stmt = insert(invites_table).values(**invite_dict)

        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError("Invite", "token hash") from e

        return invite

    async def mark_used(self, invite_id: InviteId, now: datetime) -> Optional[Invite]:
        """Atomically redeem an invite.

        A single conditional UPDATE, so concurrent redemptions of the same
        invite are serialised by the row lock and at most one matches.
        """
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.id == invite_id,
                    invites_table.c.used_at.is_(None),
                    invites_table.c.revoked_at.is_(None),
                    invites_table.c.expires_at > now,
                )
            )
            .values(used_at=now)
            .returning(*invites_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_inviter(
        self,
        inviter_id: UserId,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites by inviter with pagination.

        Args:
            inviter_id: Inviter user ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of matching invites, newest first
        """
        stmt = (
            select(invites_table)
            .where(invites_table.c.inviter_id == inviter_id)
            .order_by(invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invite(dict(row)) for row in rows]
