"""
Typesense filter builder.

Accumulates `filter_by` clauses and joins them with `&&`.
"""

from typing import Dict, List, Optional, Sequence, Union

LOCATION_KEYS = ("city", "state", "country", "zipcode")


class TypesenseQueryBuilder:
    """Fluent builder for Typesense `filter_by` strings."""

    def __init__(self) -> None:
        self._conditions: List[str] = []

    def add_location_filters(
        self,
        location: Dict[str, Optional[str]],
        include_remote: Optional[bool] = None,
    ) -> "TypesenseQueryBuilder":
        """
        Filter on location fields.

        With `include_remote`, remote jobs match regardless of location.
        """
        location_filters = [
            f"{key}:{value}"
            for key, value in location.items()
            if key in LOCATION_KEYS and value
        ]

        if location_filters and include_remote:
            self._conditions.append(f"({' && '.join(location_filters)}) || isRemote:true")
        elif location_filters:
            self._conditions.extend(location_filters)
        elif include_remote:
            self._conditions.append("isRemote:true")

        return self

    def add_skill_filters(
        self,
        skills: Optional[Sequence[str]],
        use_and_logic: bool = True,
    ) -> "TypesenseQueryBuilder":
        if skills:
            if use_and_logic:
                self._conditions.extend(f"skills:{skill}" for skill in skills)
            else:
                self._conditions.append(f"skills:[{', '.join(skills)}]")
        return self

    def add_array_filter(
        self,
        key: str,
        values: Optional[Sequence[str]],
        use_or_logic: bool = True,
    ) -> "TypesenseQueryBuilder":
        if values:
            if use_or_logic:
                self._conditions.append(f"{key}:[{', '.join(values)}]")
            else:
                self._conditions.extend(f"{key}:{value}" for value in values)
        return self

    def add_single_filter(
        self,
        key: str,
        value: Optional[Union[str, int, bool]],
    ) -> "TypesenseQueryBuilder":
        if value is None or value == "":
            return self
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._conditions.append(f"{key}:{value}")
        return self

    def build(self) -> str:
        return " && ".join(self._conditions)

    def reset(self) -> "TypesenseQueryBuilder":
        self._conditions = []
        return self
