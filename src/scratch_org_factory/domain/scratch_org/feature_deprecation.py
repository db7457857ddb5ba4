"""Deprecated scratch org features and their replacements."""

from typing import Dict, List, Optional, Sequence, Union

from scratch_org_factory.domain.scratch_org.messages import get_message

# Features with a direct replacement.
SIMPLE_FEATURE_MAPPING: Dict[str, List[str]] = {
    "SALESWAVE": ["DEVELOPMENTWAVE"],
    "SERVICECLOUD": ["SERVICEUSER"],
}

# Features the platform no longer accepts.
DEPRECATED_FEATURES: List[str] = [
    "EXPANDEDSOURCETRACKING",
    "LISTCUSTOMSETTINGCREATION",
    "AppNavCapabilities",
    "EditInSubtab",
    "OldNewRecordFlowConsole",
    "OldNewRecordFlowStd",
    "DesktopLayoutStandardOff",
    "SplitViewOnStandardOff",
    "PopOutActionsOnStandardOff",
    "PopOutActionsOnConsoleOff",
]

Features = Union[str, Sequence[str], None]


def split_features(features: Features) -> List[str]:
    """Split a ``;``-separated feature string, or copy a feature list, dropping blanks."""
    if not features:
        return []
    if isinstance(features, str):
        items = features.split(";")
    else:
        items = list(features)
    return [str(item).strip() for item in items if str(item).strip()]


def _normalize(feature: str) -> str:
    return "".join(feature.split()).upper()


class ScratchOrgFeatureDeprecation:
    """Reports and filters deprecated features in a scratch org definition."""

    def __init__(
        self,
        simple_feature_mapping: Optional[Dict[str, List[str]]] = None,
        deprecated_features: Optional[List[str]] = None,
    ):
        mapping = SIMPLE_FEATURE_MAPPING if simple_feature_mapping is None else simple_feature_mapping
        deprecated = DEPRECATED_FEATURES if deprecated_features is None else deprecated_features
        self._simple_feature_mapping = {_normalize(k): list(v) for k, v in mapping.items()}
        self._denylisted_features = {_normalize(f) for f in deprecated}

    def get_feature_warnings(self, features: Features) -> List[str]:
        """
        Build a warning for every deprecated or replaced feature requested.

        Args:
            features: ``;``-separated string or list of feature names

        Returns:
            Warning messages, empty when nothing is deprecated
        """
        warnings: List[str] = []
        for feature in split_features(features):
            normalized = _normalize(feature)
            if normalized in self._simple_feature_mapping:
                replacement = ", ".join(self._simple_feature_mapping[normalized])
                warnings.append(get_message("deprecatedFeature", normalized, replacement))
            if normalized in self._denylisted_features:
                warnings.append(get_message("removedFeature", normalized))
        return warnings

    def filter_deprecated_features(self, features: Features) -> List[str]:
        """Drop deprecated features and substitute replacements, keeping everything else as given."""
        filtered: List[str] = []
        for feature in split_features(features):
            normalized = _normalize(feature)
            if normalized in self._denylisted_features:
                continue
            if normalized in self._simple_feature_mapping:
                filtered.extend(self._simple_feature_mapping[normalized])
                continue
            filtered.append(feature)
        return filtered
