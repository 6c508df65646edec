# File: src/wall_level_splitter/store/revit_store.py
"""
Revit API model store.

This module isolates every Revit-specific call behind the ModelStore
interface, keeping the splitter testable without a Revit environment. All
Revit imports are conditional; the module imports cleanly without Revit and
RevitModelStore refuses to construct.

Usage (inside Rhino.Inside.Revit or pyRevit only):
    from wall_level_splitter.store.revit_store import RevitModelStore

    store = RevitModelStore(doc)
    summary = split_walls_by_levels(store, wall_ids, level_ids)
"""

from typing import Any, Dict, Optional

from ..config.splitting import get_split_param
from ..utils.logging_config import get_logger
from ..wall_data.parameters import (
    ParameterKey,
    ParameterValue,
    ParameterWriteStatus,
    StorageKind,
)
from ..wall_data.wall_types import (
    CrossSection,
    Level,
    LevelConstrained,
    Unconnected,
    WallKind,
    WallSpec,
)
from .base import ModelElement, ModelStore

logger = get_logger(__name__)

# =============================================================================
# Conditional Revit Imports
# =============================================================================

REVIT_AVAILABLE = False
REVIT_ERROR: Optional[str] = None

try:
    import clr
    clr.AddReference("RevitAPI")
    from Autodesk.Revit import DB
    REVIT_AVAILABLE = True
except ImportError as e:
    REVIT_ERROR = str(e)
except Exception as e:
    REVIT_ERROR = str(e)


# =============================================================================
# Parameter Mapping
# =============================================================================

# ParameterKey -> BuiltInParameter name
BUILTIN_PARAMETER_NAMES: Dict[ParameterKey, str] = {
    ParameterKey.ROOM_BOUNDING: "WALL_ATTR_ROOM_BOUNDING",
    ParameterKey.COMMENTS: "ALL_MODEL_INSTANCE_COMMENTS",
    ParameterKey.MARK: "ALL_MODEL_MARK",
    ParameterKey.LOCATION_LINE: "WALL_KEY_REF_PARAM",
    ParameterKey.TOP_CONSTRAINT: "WALL_HEIGHT_TYPE",
    ParameterKey.TOP_OFFSET: "WALL_TOP_OFFSET",
}

STORAGE_KINDS: Dict[str, StorageKind] = {
    "Integer": StorageKind.INTEGER,
    "Double": StorageKind.DOUBLE,
    "String": StorageKind.STRING,
    "ElementId": StorageKind.ELEMENT_ID,
}


def element_id_value(element_id) -> int:
    """Integer value of an ElementId (Revit 2024+ ``Value``, older ``IntegerValue``)."""
    value = getattr(element_id, "Value", None)
    if value is None:
        value = element_id.IntegerValue
    return int(value)


class RevitModelStore(ModelStore):
    """ModelStore backed by a Revit document.

    Args:
        doc: Revit Document to edit

    Raises:
        RuntimeError: If the Revit API is not available
    """

    def __init__(self, doc) -> None:
        if not REVIT_AVAILABLE:
            raise RuntimeError(f"Revit API not available: {REVIT_ERROR}")
        self._doc = doc
        self._group = None
        self._transaction = None

    @property
    def store_name(self) -> str:
        return "Revit"

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_revit_element(self, element_id: int):
        return self._doc.GetElement(DB.ElementId(element_id))

    @staticmethod
    def _builtin(key: ParameterKey):
        return getattr(DB.BuiltInParameter, BUILTIN_PARAMETER_NAMES[key])

    @staticmethod
    def _param_double(element, bip, default: float = 0.0) -> float:
        param = element.get_Parameter(bip)
        return param.AsDouble() if param is not None else default

    def _to_wall_spec(self, wall) -> WallSpec:
        wall_type = wall.WallType
        if wall_type is not None and wall_type.Kind == DB.WallKind.Curtain:
            kind = WallKind.CURTAIN
        elif wall_type is not None and wall_type.Kind == DB.WallKind.Stacked:
            kind = WallKind.STACKED
        else:
            kind = WallKind.BASIC

        location = wall.Location
        curve = location.Curve if isinstance(location, DB.LocationCurve) else None

        structural_param = wall.get_Parameter(DB.BuiltInParameter.WALL_STRUCTURAL_SIGNIFICANT)
        structural = structural_param is not None and structural_param.AsInteger() == 1

        base_param = wall.get_Parameter(DB.BuiltInParameter.WALL_BASE_CONSTRAINT)
        base_level_id = (
            element_id_value(base_param.AsElementId()) if base_param is not None else None
        )
        base_offset = self._param_double(wall, DB.BuiltInParameter.WALL_BASE_OFFSET)

        top_param = wall.get_Parameter(DB.BuiltInParameter.WALL_HEIGHT_TYPE)
        top_id = top_param.AsElementId() if top_param is not None else DB.ElementId.InvalidElementId
        if top_id != DB.ElementId.InvalidElementId:
            top_constraint = LevelConstrained(
                level_id=element_id_value(top_id),
                top_offset=self._param_double(wall, DB.BuiltInParameter.WALL_TOP_OFFSET),
            )
        else:
            top_constraint = Unconnected(
                height=self._param_double(wall, DB.BuiltInParameter.WALL_USER_HEIGHT_PARAM)
            )

        # CrossSection exists from Revit 2022
        cross_section = CrossSection.VERTICAL
        slanted = getattr(getattr(DB, "WallCrossSection", None), "SingleSlanted", None)
        if slanted is not None and getattr(wall, "CrossSection", None) == slanted:
            cross_section = CrossSection.SLANTED

        return WallSpec(
            id=element_id_value(wall.Id),
            wall_type_id=element_id_value(wall.GetTypeId()),
            location_curve=curve,
            flipped=bool(wall.Flipped),
            structural=structural,
            base_level_id=base_level_id,
            base_offset=base_offset,
            top_constraint=top_constraint,
            kind=kind,
            has_edited_profile=wall.SketchId != DB.ElementId.InvalidElementId,
            cross_section=cross_section,
        )

    # -------------------------------------------------------------------------
    # ModelStore interface
    # -------------------------------------------------------------------------

    def get_element(self, element_id: int) -> Optional[ModelElement]:
        element = self._get_revit_element(element_id)
        if isinstance(element, DB.Level):
            return Level(id=element_id, name=element.Name, elevation=element.Elevation)
        if isinstance(element, DB.Wall):
            return self._to_wall_spec(element)
        return None

    def create_wall_segment(
        self,
        curve: Any,
        wall_type_id: int,
        base_level_id: int,
        height: float,
        base_offset: float,
        flipped: bool,
        structural: bool,
    ) -> int:
        # Wall.Create always builds a vertical wall
        wall = DB.Wall.Create(
            self._doc,
            curve,
            DB.ElementId(wall_type_id),
            DB.ElementId(base_level_id),
            height,
            base_offset,
            flipped,
            structural,
        )
        return element_id_value(wall.Id)

    def delete_element(self, element_id: int) -> None:
        self._doc.Delete(DB.ElementId(element_id))

    def get_parameter(
        self, element_id: int, key: ParameterKey
    ) -> Optional[ParameterValue]:
        element = self._get_revit_element(element_id)
        if element is None:
            return None
        param = element.get_Parameter(self._builtin(key))
        if param is None:
            return None

        storage = STORAGE_KINDS.get(str(param.StorageType))
        if storage is StorageKind.INTEGER:
            return ParameterValue.integer(param.AsInteger())
        if storage is StorageKind.DOUBLE:
            return ParameterValue.double(param.AsDouble())
        if storage is StorageKind.STRING:
            return ParameterValue.string(param.AsString())
        if storage is StorageKind.ELEMENT_ID:
            return ParameterValue.element_id(element_id_value(param.AsElementId()))
        return None

    def set_parameter(
        self, element_id: int, key: ParameterKey, value: ParameterValue
    ) -> ParameterWriteStatus:
        element = self._get_revit_element(element_id)
        param = element.get_Parameter(self._builtin(key))
        if param.IsReadOnly:
            return ParameterWriteStatus.READ_ONLY

        if value.storage is StorageKind.ELEMENT_ID:
            accepted = param.Set(DB.ElementId(value.value))
        else:
            accepted = param.Set(value.value)
        if not accepted:
            return ParameterWriteStatus.REJECTED
        return ParameterWriteStatus.OK

    def start_group(self, name: str) -> None:
        self._group = DB.TransactionGroup(self._doc, name)
        self._group.Start()
        self._transaction = DB.Transaction(self._doc, get_split_param("transaction_name"))
        self._transaction.Start()

    def commit_group(self) -> None:
        # Revit failure handling can roll the transaction back inside Commit
        status = self._transaction.Commit()
        if status != DB.TransactionStatus.Committed:
            raise RuntimeError(f"Revit transaction not committed (status {status})")
        self._group.Assimilate()
        self._transaction = None
        self._group = None

    def rollback_group(self) -> None:
        if (
            self._transaction is not None
            and self._transaction.GetStatus() == DB.TransactionStatus.Started
        ):
            self._transaction.RollBack()
        if self._group is not None:
            self._group.RollBack()
        self._transaction = None
        self._group = None
        logger.info("Revit transaction group rolled back")
