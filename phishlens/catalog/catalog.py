from collections.abc import Iterator, Mapping, Sequence
from functools import lru_cache
from types import MappingProxyType

from phishlens.catalog.exceptions import CatalogIntegrityError, UnknownFeatureError
from phishlens.catalog.features import FEATURE_CATEGORIES, FEATURE_LABELS
from phishlens.catalog.models import FeatureCategory, FeatureDefinition


class FeatureCatalog:
    """Read-only feature table and its ordered grouping into categories.

    The categories must cover every feature exactly once; construction fails
    with CatalogIntegrityError otherwise.
    """

    def __init__(
        self,
        labels: Mapping[str, str] = FEATURE_LABELS,
        categories: Sequence[tuple[str, Sequence[str]]] = FEATURE_CATEGORIES,
    ) -> None:
        self._labels: Mapping[str, str] = MappingProxyType(dict(labels))
        self._categories = tuple(
            FeatureCategory(name=name, feature_ids=tuple(ids)) for name, ids in categories
        )
        self._check_partition()

    def label_of(self, feature_id: str) -> str:
        """Return the human-readable label for a feature id.

        Raises:
            UnknownFeatureError: if the id is not in the catalog.
        """
        try:
            return self._labels[feature_id]
        except KeyError:
            raise UnknownFeatureError(feature_id) from None

    def categories(self) -> tuple[FeatureCategory, ...]:
        return self._categories

    def feature_ids(self) -> tuple[str, ...]:
        """All feature ids in display order."""
        return tuple(fid for category in self._categories for fid in category.feature_ids)

    def definitions(self) -> tuple[FeatureDefinition, ...]:
        return tuple(
            FeatureDefinition(id=fid, label=self._labels[fid]) for fid in self.feature_ids()
        )

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self._labels

    def __iter__(self) -> Iterator[FeatureDefinition]:
        return iter(self.definitions())

    def _check_partition(self) -> None:
        seen: set[str] = set()
        for category in self._categories:
            for fid in category.feature_ids:
                if fid in seen:
                    raise CatalogIntegrityError(
                        f"Feature '{fid}' appears in more than one category"
                    )
                if fid not in self._labels:
                    raise CatalogIntegrityError(
                        f"Category '{category.name}' references unknown feature '{fid}'"
                    )
                seen.add(fid)
        missing = set(self._labels) - seen
        if missing:
            raise CatalogIntegrityError(
                f"Features without a category: {sorted(missing)}"
            )


@lru_cache(maxsize=1)
def default_catalog() -> FeatureCatalog:
    """The catalog shared with the classification service."""
    return FeatureCatalog()
