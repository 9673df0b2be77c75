"""Example catalog: the static list of FHEVM examples served by the hub.

The catalog is a plain, ordered, read-only collection of
:class:`ExampleDescriptor` records.  The CLI builds one with
:func:`default_catalog` per invocation and hands it to every component that
needs example metadata.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field

from .errors import ExampleNotFoundError


class Category(str, Enum):
    """Closed set of example categories, in display order."""

    BASIC = "basic"
    ENCRYPTION = "encryption"
    ACCESS_CONTROL = "access-control"
    ADVANCED = "advanced"
    ANTI_PATTERN = "anti-pattern"


CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)


class ExampleDescriptor(BaseModel):
    """Immutable metadata describing one demonstration contract."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Lookup key and directory-name component")
    description: str = Field(..., description="One-line human-readable summary")
    category: Category
    source_file: str = Field(..., description="Contract filename inside contracts/")
    concepts: tuple[str, ...] = Field(default=())

    @property
    def contract_name(self) -> str:
        """Contract identifier, e.g. ``FHECounter`` for ``FHECounter.sol``."""
        return PurePath(self.source_file).stem

    @property
    def contract_var_name(self) -> str:
        """Variable-name form of the contract, e.g. ``fHECounter``."""
        name = self.contract_name
        return name[:1].lower() + name[1:]

    @property
    def test_file_name(self) -> str:
        return f"{self.contract_name}.ts"


class ExampleCatalog:
    """Ordered, read-only collection of examples.

    Raises:
        ValueError: If two descriptors share a name.
    """

    def __init__(self, examples: Iterable[ExampleDescriptor]) -> None:
        self._examples: tuple[ExampleDescriptor, ...] = tuple(examples)
        seen: set[str] = set()
        for example in self._examples:
            if example.name in seen:
                raise ValueError(f"Duplicate example name in catalog: {example.name}")
            seen.add(example.name)

    def __iter__(self) -> Iterator[ExampleDescriptor]:
        return iter(self._examples)

    def __len__(self) -> int:
        return len(self._examples)

    def __contains__(self, name: object) -> bool:
        return any(e.name == name for e in self._examples)

    def names(self) -> list[str]:
        """Every example name, in declaration order."""
        return [e.name for e in self._examples]

    def find(self, name: str) -> ExampleDescriptor | None:
        """Return the example called *name*, or ``None`` if there is none."""
        for example in self._examples:
            if example.name == name:
                return example
        return None

    def require(self, name: str) -> ExampleDescriptor:
        """Like :meth:`find` but raise :class:`ExampleNotFoundError` when absent."""
        example = self.find(name)
        if example is None:
            raise ExampleNotFoundError(name, self.names())
        return example

    def by_category(self) -> dict[Category, list[ExampleDescriptor]]:
        """Group examples by category.

        All five categories are present, in :data:`CATEGORY_ORDER`; examples
        keep their declaration order inside each group.
        """
        groups: dict[Category, list[ExampleDescriptor]] = {c: [] for c in CATEGORY_ORDER}
        for example in self._examples:
            groups[example.category].append(example)
        return groups


# ---------------------------------------------------------------------------
# Built-in examples
# ---------------------------------------------------------------------------

DEFAULT_EXAMPLES: tuple[ExampleDescriptor, ...] = (
    ExampleDescriptor(
        name="counter",
        description="Basic encrypted counter with increment/decrement operations",
        category=Category.BASIC,
        source_file="FHECounter.sol",
        concepts=("euint32", "FHE.add", "FHE.sub", "FHE.allow", "inputProof"),
    ),
    ExampleDescriptor(
        name="input-proof",
        description=(
            "Complete guide to FHE.fromExternal() and input proofs for all encrypted types"
        ),
        category=Category.BASIC,
        source_file="FHEInputProof.sol",
        concepts=(
            "FHE.fromExternal",
            "input proofs",
            "euint8",
            "euint16",
            "euint32",
            "euint64",
            "ebool",
            "eaddress",
            "batch processing",
        ),
    ),
    ExampleDescriptor(
        name="comparisons",
        description="Encrypted comparison operations (eq, ne, lt, gt, le, ge)",
        category=Category.BASIC,
        source_file="FHEComparisons.sol",
        concepts=("FHE.eq", "FHE.ne", "FHE.lt", "FHE.gt", "FHE.le", "FHE.ge", "ebool"),
    ),
    ExampleDescriptor(
        name="arithmetic",
        description="Encrypted arithmetic operations (add, sub, mul)",
        category=Category.BASIC,
        source_file="FHEArithmetic.sol",
        concepts=("FHE.add", "FHE.sub", "FHE.mul"),
    ),
    ExampleDescriptor(
        name="bitwise",
        description="Encrypted bitwise operations (and, or, xor, shl, shr)",
        category=Category.BASIC,
        source_file="FHEBitwise.sol",
        concepts=("FHE.and", "FHE.or", "FHE.xor", "FHE.shl", "FHE.shr"),
    ),
    ExampleDescriptor(
        name="encryption",
        description="Encryption patterns: asEuintX, fromExternal, batch operations",
        category=Category.ENCRYPTION,
        source_file="FHEEncryption.sol",
        concepts=(
            "FHE.asEuint8",
            "FHE.asEuint16",
            "FHE.asEuint32",
            "FHE.asEuint64",
            "FHE.fromExternal",
            "batch encryption",
            "type casting",
        ),
    ),
    ExampleDescriptor(
        name="decryption",
        description=(
            "Decryption patterns: user decryption, multi-user access, conditional access"
        ),
        category=Category.ENCRYPTION,
        source_file="FHEDecryption.sol",
        concepts=(
            "FHE.allow",
            "client-side decryption",
            "access control",
            "conditional decryption",
            "batch decryption",
        ),
    ),
    ExampleDescriptor(
        name="encrypted-erc20",
        description="ERC20 token with encrypted balances",
        category=Category.ENCRYPTION,
        source_file="EncryptedERC20.sol",
        concepts=("euint64", "encrypted balances", "confidential transfers"),
    ),
    ExampleDescriptor(
        name="access-control",
        description="Access control patterns for encrypted data",
        category=Category.ACCESS_CONTROL,
        source_file="FHEAccessControl.sol",
        concepts=("FHE.allow", "FHE.allowThis", "re-encryption", "permissions"),
    ),
    ExampleDescriptor(
        name="blind-auction",
        description="Sealed-bid auction where bids remain encrypted until reveal",
        category=Category.ADVANCED,
        source_file="BlindAuction.sol",
        concepts=("euint64", "FHE.select", "FHE.gt", "encrypted bids"),
    ),
    ExampleDescriptor(
        name="trustless-matching",
        description=(
            "Private matching (dating app style) - votes revealed only on mutual match"
        ),
        category=Category.ADVANCED,
        source_file="TrustlessMatching.sol",
        concepts=("ebool", "FHE.and", "encrypted votes", "conditional reveal"),
    ),
    ExampleDescriptor(
        name="anti-missing-allow",
        description="Anti-pattern: Missing FHE.allow causing access issues",
        category=Category.ANTI_PATTERN,
        source_file="AntiMissingAllow.sol",
        concepts=("FHE.allow", "common mistakes", "access errors"),
    ),
    ExampleDescriptor(
        name="anti-overflow",
        description="Anti-pattern: Overflow/underflow without proper checks",
        category=Category.ANTI_PATTERN,
        source_file="AntiOverflow.sol",
        concepts=("overflow", "underflow", "range checks"),
    ),
)


def default_catalog() -> ExampleCatalog:
    """Build the catalog of built-in examples."""
    return ExampleCatalog(DEFAULT_EXAMPLES)
