"""create users and dictionary tables

Revision ID: 4f2a9c1d7e03
Revises:
Create Date: 2025-03-26 18:13:51.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e03"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LANGUAGES = ("en", "ru", "da", "es", "fr", "de", "it", "pt", "zh", "ja", "ko", "ar")
PARTS_OF_SPEECH = (
    "noun", "verb", "phrasal_verb", "adjective", "adverb", "pronoun", "preposition",
    "conjunction", "interjection", "numeral", "article", "exclamation", "abbreviation",
    "suffix", "phrase", "sentence", "undefined",
)

language_code = sa.Enum(*LANGUAGES, name="language_code", native_enum=False)
part_of_speech = sa.Enum(*PARTS_OF_SPEECH, name="part_of_speech", native_enum=False)
difficulty_level = sa.Enum("A1", "A2", "B1", "B2", "C1", "C2", name="difficulty_level", native_enum=False)
source_type = sa.Enum("ai_generated", "user", "admin", name="source_type", native_enum=False)
learning_status = sa.Enum("notStarted", "inProgress", "learned", "needsReview", "difficult", name="learning_status", native_enum=False)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("base_language", language_code, nullable=False),
        sa.Column("target_language", language_code, nullable=False),
        sa.Column("new_words_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_word_added_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("word", sa.String(length=255), nullable=False),
        sa.Column("phonetic", sa.String(length=100), nullable=True),
        sa.Column("language_code", language_code, nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("word", "language_code", name="uq_words_word_language"),
    )
    op.create_index(op.f("ix_words_word"), "words", ["word"], unique=False)
    op.create_index(op.f("ix_words_language_code"), "words", ["language_code"], unique=False)

    op.create_table(
        "one_word_definitions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("definition", sa.Text(), nullable=False),
        sa.Column("language_code", language_code, nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index(op.f("ix_one_word_definitions_language_code"), "one_word_definitions", ["language_code"], unique=False)

    op.create_table(
        "main_dictionary",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("pair_key", sa.String(length=36), nullable=False),
        sa.Column("word_id", sa.Integer(), sa.ForeignKey("words.id"), nullable=False),
        sa.Column("one_word_definition_id", sa.Integer(), sa.ForeignKey("one_word_definitions.id"), nullable=False),
        sa.Column("base_language", language_code, nullable=False),
        sa.Column("target_language", language_code, nullable=False),
        sa.Column("description_base", sa.String(length=2000), nullable=True),
        sa.Column("description_target", sa.String(length=2000), nullable=True),
        sa.Column("part_of_speech", part_of_speech, nullable=False),
        sa.Column("difficulty_level", difficulty_level, nullable=False),
        sa.Column("source", source_type, nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index(op.f("ix_main_dictionary_pair_key"), "main_dictionary", ["pair_key"], unique=False)
    op.create_index(op.f("ix_main_dictionary_word_id"), "main_dictionary", ["word_id"], unique=False)
    op.create_index(op.f("ix_main_dictionary_base_language"), "main_dictionary", ["base_language"], unique=False)
    op.create_index(op.f("ix_main_dictionary_target_language"), "main_dictionary", ["target_language"], unique=False)

    op.create_table(
        "dictionary_examples",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("dictionary_id", sa.Integer(), sa.ForeignKey("main_dictionary.id", ondelete="CASCADE"), nullable=False),
        sa.Column("example", sa.Text(), nullable=False),
        sa.Column("language_code", language_code, nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(op.f("ix_dictionary_examples_dictionary_id"), "dictionary_examples", ["dictionary_id"], unique=False)

    op.create_table(
        "dictionary_synonyms",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("dictionary_id", sa.Integer(), sa.ForeignKey("main_dictionary.id", ondelete="CASCADE"), nullable=False),
        sa.Column("synonym", sa.String(length=255), nullable=False),
        sa.Column("language_code", language_code, nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(op.f("ix_dictionary_synonyms_dictionary_id"), "dictionary_synonyms", ["dictionary_id"], unique=False)

    op.create_table(
        "user_dictionary",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("main_dictionary_id", sa.Integer(), sa.ForeignKey("main_dictionary.id"), nullable=False),
        sa.Column("base_language", language_code, nullable=False),
        sa.Column("target_language", language_code, nullable=False),
        sa.Column("learning_status", learning_status, nullable=False),
        sa.Column("progress", sa.Float(), nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("time_word_was_started_to_learn", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_id", "main_dictionary_id", name="uq_user_dictionary_user_entry"),
    )
    op.create_index(op.f("ix_user_dictionary_user_id"), "user_dictionary", ["user_id"], unique=False)
    op.create_index(op.f("ix_user_dictionary_main_dictionary_id"), "user_dictionary", ["main_dictionary_id"], unique=False)


def downgrade() -> None:
    op.drop_table("user_dictionary")
    op.drop_table("dictionary_synonyms")
    op.drop_table("dictionary_examples")
    op.drop_table("main_dictionary")
    op.drop_table("one_word_definitions")
    op.drop_table("words")
    op.drop_table("users")
