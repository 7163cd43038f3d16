"""Static checks over table, constraint and index definitions.

Every check runs and every failure is reported so an editor can show all problems
at once. Nothing here raises; callers decide whether to block generation. The
builders in this package do not re-run these checks.
"""

from dataclasses import dataclass, field
from typing import List

from schema import ConstraintDefinition, ConstraintType, IndexDefinition, TableDefinition


@dataclass(frozen=True)
class ValidationIssue:
    """A validation failure anchored to an editor field.

    ``field`` is a dotted path such as ``constraint.{id}.columns``.
    """

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[str]:
        return [issue.message for issue in self.issues]


def _foreign_key_issues(constraint: ConstraintDefinition) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    prefix = f"constraint.{constraint.id}"
    if not constraint.referenced_table:
        issues.append(
            ValidationIssue(f"{prefix}.referencedTable", "Foreign key must reference a table")
        )
    if not constraint.referenced_columns:
        issues.append(
            ValidationIssue(f"{prefix}.referencedColumns", "Foreign key must reference columns")
        )
    if len(constraint.columns) != len(constraint.referenced_columns):
        issues.append(
            ValidationIssue(
                f"{prefix}.columns", "Foreign key column count must match referenced columns"
            )
        )
    return issues


def validate_table_definition(table: TableDefinition) -> ValidationResult:
    """Validate a table definition before generating CREATE TABLE."""
    issues: List[ValidationIssue] = []

    if not table.name.strip():
        issues.append(ValidationIssue("table.name", "Table name is required"))

    if not table.columns:
        issues.append(ValidationIssue("table.columns", "Table must have at least one column"))

    unnamed = [column for column in table.columns if not column.name.strip()]
    if unnamed:
        issues.append(
            ValidationIssue(f"column.{unnamed[0].id}.name", "All columns must have a name")
        )

    seen: set[str] = set()
    reported: set[str] = set()
    for column in table.columns:
        key = column.name.strip().lower()
        if not key:
            continue
        if key in seen and key not in reported:
            reported.add(key)
            issues.append(
                ValidationIssue(f"column.{column.id}.name", f"Duplicate column name: {key}")
            )
        seen.add(key)

    for constraint in table.constraints:
        if constraint.type == ConstraintType.FOREIGN_KEY:
            issues.extend(_foreign_key_issues(constraint))

    return ValidationResult(valid=not issues, issues=issues)


def validate_constraint_definition(constraint: ConstraintDefinition) -> List[ValidationIssue]:
    """Check a single constraint as edited in a constraint editor row."""
    prefix = f"constraint.{constraint.id}"
    issues: List[ValidationIssue] = []

    if constraint.type in (
        ConstraintType.PRIMARY_KEY,
        ConstraintType.UNIQUE,
        ConstraintType.FOREIGN_KEY,
    ) and not constraint.columns:
        issues.append(ValidationIssue(f"{prefix}.columns", "Select at least one column"))

    if constraint.type == ConstraintType.FOREIGN_KEY:
        issues.extend(_foreign_key_issues(constraint))
    elif constraint.type == ConstraintType.CHECK:
        if not (constraint.check_expression or "").strip():
            issues.append(
                ValidationIssue(f"{prefix}.checkExpression", "Check expression is required")
            )
    elif constraint.type == ConstraintType.EXCLUDE:
        if not constraint.exclude_elements:
            issues.append(
                ValidationIssue(
                    f"{prefix}.excludeElements", "Exclude constraint must have at least one element"
                )
            )

    return issues


def validate_index_definition(index: IndexDefinition) -> List[ValidationIssue]:
    """Check a single index as edited in an index editor row."""
    prefix = f"index.{index.id}"
    issues: List[ValidationIssue] = []
    if not index.columns:
        issues.append(ValidationIssue(f"{prefix}.columns", "Index must have at least one column"))
    elif any(not column.name.strip() for column in index.columns):
        issues.append(ValidationIssue(f"{prefix}.columns", "All index columns must have a name"))
    return issues
