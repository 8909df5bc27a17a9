import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from epcsaft.common.exceptions import IncompatibleParameters

# explicit import to trigger registration of "epcsaft"
from .. import interfaces  # noqa: F401
from .records import (
    ElectrolytePcSaftBinaryRecord,
    Identifier,
    PureRecord,
    SegmentRecord,
    pure_record_from_dict,
)
from .registry import build
from .segments import pure_record_from_segments

logger = logging.getLogger(__name__)


def _pure_records(params: Dict[str, Any]) -> List[PureRecord]:
    segment_records = [SegmentRecord.from_dict(s) for s in params.get("segment_records", [])]
    records: List[PureRecord] = []
    for raw in params["pure_records"]:
        if "segments" in raw:
            records.append(
                pure_record_from_segments(Identifier.from_dict(raw.get("identifier", {})), raw["segments"], segment_records)
            )
        else:
            records.append(pure_record_from_dict(raw))
    return records


def binary_matrix_from_pairs(
    pure_records: Sequence[PureRecord], pairs: Sequence[Dict[str, Any]]
) -> Optional[List[List[ElectrolytePcSaftBinaryRecord]]]:
    """Place ``{"id1", "id2", "k_ij", ...}`` entries symmetrically into an ``n x n`` matrix."""
    if not pairs:
        return None
    n = len(pure_records)
    matrix = [[ElectrolytePcSaftBinaryRecord() for _ in range(n)] for _ in range(n)]
    for raw in pairs:
        id1 = Identifier.from_dict(raw["id1"])
        id2 = Identifier.from_dict(raw["id2"])
        i = next((k for k, p in enumerate(pure_records) if p.identifier.matches(id1)), None)
        j = next((k for k, p in enumerate(pure_records) if p.identifier.matches(id2)), None)
        if i is None or j is None:
            logger.warning("skipping binary record %s/%s: component not in system", id1.name, id2.name)
            continue
        record = ElectrolytePcSaftBinaryRecord.from_dict(raw)
        matrix[i][j] = record
        matrix[j][i] = record
    return matrix


def parameters_from_params(params: Dict[str, Any]):
    if "pure_records" not in params:
        raise IncompatibleParameters("Parameter file has no 'pure_records'")
    pure_records = _pure_records(params)
    binary = binary_matrix_from_pairs(pure_records, params.get("binary_records", []))
    return interfaces.ElectrolytePcSaftParameters.from_records(
        pure_records, binary, params.get("association_combining_rule")
    )


def load_parameters_from_json(json_path: Union[str, Path]):
    p = Path(json_path)
    data = json.loads(p.read_text(encoding="utf-8"))
    # both {model, params} and a bare params object are accepted
    params = data.get("params", data)
    model = data.get("model", "epcsaft")
    logger.debug("loading '%s' parameters from %s", model, p)
    return build(model, params)
