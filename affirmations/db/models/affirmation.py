import uuid
import sqlalchemy as sa

from affirmations.db.base import Base
from affirmations.utils.types import TimeOfDay


class Affirmation(Base):
    __tablename__ = "affirmations"

    id = sa.Column(sa.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    collection_id = sa.Column(
        sa.String(36),
        sa.ForeignKey("affirmation_collections.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )
    user_id = sa.Column(sa.String(255), nullable=False, index=True)

    text = sa.Column(sa.Text, nullable=False)
    category = sa.Column(sa.Text, nullable=True)
    language = sa.Column(sa.Text, nullable=True)
    tags = sa.Column(sa.Text, nullable=True)

    use_time_of_day = sa.Column(
        sa.Enum(
            TimeOfDay,
            name="time_of_day",
            native_enum=False,
            length=16,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=True
    )
    is_favorite = sa.Column(sa.Boolean, nullable=False, default=False, server_default=sa.false())
    is_system = sa.Column(sa.Boolean, nullable=False, default=False, server_default=sa.false())

    created_at = sa.Column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
    updated_at = sa.Column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
