from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .consistency.scoring.standard_scorer import HealthPolicy, StandardHealthScorer
from .consistency.validator import ConsistencyValidator
from .core.constants import DEFAULT_COVERAGE_DISPLAY_LIMIT
from .coverage.calculator import CoverageCalculator
from .database.connection import DBConfig, DatabaseConnection
from .enablement.service import DocumentationHealthService
from .features.mysql_feature_repository import MySQLFeatureRepository
from .features.reader import RegistryReader
from .manuals.mysql_section_repository import MySQLSectionRepository
from .manuals.reader import CorpusReader
from .remediation.service import RemediationService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    features_repo: MySQLFeatureRepository
    sections_repo: MySQLSectionRepository

    remediation_service: RemediationService
    documentation_service: DocumentationHealthService


def build_container(
    *,
    db_config: dict,
    health_policy: Optional[Mapping[str, object]] = None,
    coverage_limit: int = DEFAULT_COVERAGE_DISPLAY_LIMIT,
    optimistic_locking: bool = False,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))

    features_repo = MySQLFeatureRepository(conn)
    sections_repo = MySQLSectionRepository(conn)

    scorer = StandardHealthScorer(HealthPolicy.from_mapping(health_policy))
    remediation_service = RemediationService(sections_repo, optimistic_locking=optimistic_locking)
    documentation_service = DocumentationHealthService(
        RegistryReader(features_repo),
        CorpusReader(sections_repo),
        remediation_service,
        scorer=scorer,
        validator=ConsistencyValidator(scorer),
        coverage_calculator=CoverageCalculator(display_limit=coverage_limit),
    )

    return Container(
        conn=conn,
        features_repo=features_repo,
        sections_repo=sections_repo,
        remediation_service=remediation_service,
        documentation_service=documentation_service,
    )
