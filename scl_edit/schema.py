"""
MIT License

Copyright (c) 2026 Mario Dimitri Capuozzo

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated documentation files (the “Software”), 
to deal in the Software without restriction, including without limitation the rights to use, copy, modify, merge, publish, distribute, sublicense, 
and/or sell copies of the Software, and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, 
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, 
WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE. 

SCL schema tables
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, NamedTuple, Tuple


class Family(Enum):
    # How the identity of a tag is computed
    SCL = "SCL"
    NAMING = "Naming"
    SINGLETON = "Singleton"
    ID_NAMING = "IDNaming"
    IX_NAMING = "IxNaming"
    PRIVATE = "Private"
    HITEM = "Hitem"
    TERMINAL = "Terminal"
    LNODE = "LNode"
    KDC = "KDC"
    ASSOCIATION = "Association"
    LDEVICE = "LDevice"
    IED_NAME = "IEDName"
    FCDA = "FCDA"
    EXT_REF = "ExtRef"
    LN = "LN"
    CLIENT_LN = "ClientLN"
    VAL = "Val"
    CONNECTED_AP = "ConnectedAP"
    CONTROL_BLOCK = "ControlBlock"
    PHYS_CONN = "PhysConn"
    P = "P"
    ENUM_VAL = "EnumVal"
    PROT_NS = "ProtNs"


class TagSchema(NamedTuple):
    family: Family
    parents: Tuple[str, ...]
    children: Tuple[str, ...]


def _unique(*groups: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(tag for group in groups for tag in group))


# Tag groups of the SCL schema (IEC 61850-6)
T_ABSTRACT_CONDUCTING_EQUIPMENT = ("TransformerWinding", "ConductingEquipment")
T_EQUIPMENT = ("GeneralEquipment", "PowerTransformer") + T_ABSTRACT_CONDUCTING_EQUIPMENT
T_EQUIPMENT_CONTAINER = ("Substation", "VoltageLevel", "Bay")
T_GENERAL_EQUIPMENT_CONTAINER = ("Process", "Line")
T_ABSTRACT_EQ_FUNC_SUB_FUNC = ("EqSubFunction", "EqFunction")
T_POWER_SYSTEM_RESOURCE = (
    ("SubFunction", "Function", "TapChanger", "SubEquipment")
    + T_EQUIPMENT
    + T_EQUIPMENT_CONTAINER
    + T_GENERAL_EQUIPMENT_CONTAINER
    + T_ABSTRACT_EQ_FUNC_SUB_FUNC
)
T_LNODE_CONTAINER = ("ConnectivityNode",) + T_POWER_SYSTEM_RESOURCE
T_CERTIFICATE = ("GOOSESecurity", "SMVSecurity")
T_NAMING = ("SubNetwork",) + T_CERTIFICATE + T_LNODE_CONTAINER

T_ABSTRACT_DATA_ATTRIBUTE = ("BDA", "DA")
T_CONTROL_WITH_IED_NAME = ("SampledValueControl", "GSEControl")
T_CONTROL_WITH_TRIGGER_OPT = ("LogControl", "ReportControl")
T_CONTROL = T_CONTROL_WITH_IED_NAME + T_CONTROL_WITH_TRIGGER_OPT
T_CONTROL_BLOCK = ("GSE", "SMV")
T_UN_NAMING = (
    "ConnectedAP", "PhysConn", "SDO", "DO", "DAI", "SDI", "DOI", "Inputs",
    "RptEnabled", "Server", "ServerAt", "SettingControl", "Communication",
    "Log", "LDevice", "DataSet", "AccessPoint", "IED", "NeutralPoint",
) + T_CONTROL + T_CONTROL_BLOCK + T_ABSTRACT_DATA_ATTRIBUTE

T_ANY_LN = ("LN0", "LN")
T_ANY_CONTENT_FROM_OTHER_NAMESPACE = ("Text", "Private", "Hitem", "AccessControl")
T_CERT = ("Subject", "IssuerName")
T_DURATION_IN_MILLI_SEC = ("MinTime", "MaxTime")
T_ID_NAMING = ("LNodeType", "DOType", "DAType", "EnumType")

T_SERVICE_YES_NO = (
    "FileHandling", "TimeSyncProt", "CommProt", "SGEdit", "ConfSG",
    "GetDirectory", "GetDataObjectDefinition", "DataObjectDirectory",
    "GetDataSetValue", "SetDataSetValue", "DataSetDirectory", "ReadWrite",
    "TimerActivatedControl", "GetCBValues", "GSEDir", "ConfLdName",
)
T_SERVICE_WITH_MAX_AND_MAX_ATTRIBUTES = ("DynDataSet", "ConfDataSet")
T_SERVICE_WITH_MAX = (
    "GSSE", "GOOSE", "ConfReportControl", "SMVsc",
) + T_SERVICE_WITH_MAX_AND_MAX_ATTRIBUTES
T_SERVICE_WITH_MAX_NON_ZERO = ("ConfLogControl", "ConfSigRef")
T_SERVICE_SETTINGS = ("ReportSettings", "LogSettings", "GSESettings", "SMVSettings")

T_BASE_ELEMENT = ("SCL",) + T_NAMING + T_UN_NAMING + T_ID_NAMING

SCL_TAGS: Tuple[str, ...] = _unique(
    T_BASE_ELEMENT,
    T_ANY_CONTENT_FROM_OTHER_NAMESPACE,
    ("Header", "LNode", "Val", "Voltage", "Services"),
    T_CERT,
    T_DURATION_IN_MILLI_SEC,
    ("Association", "FCDA", "ClientLN", "IEDName", "ExtRef", "Protocol"),
    T_ANY_LN,
    T_SERVICE_YES_NO,
    ("DynAssociation", "SettingGroups"),
    T_SERVICE_WITH_MAX,
    T_SERVICE_WITH_MAX_NON_ZERO,
    T_SERVICE_SETTINGS,
    (
        "ConfLNs", "ClientServices", "SupSubscription", "ValueHandling",
        "RedProt", "McSecurity", "KDC", "Address", "P", "ProtNs", "EnumVal",
        "Terminal", "BitRate", "Authentication", "DataTypeTemplates",
        "History", "OptFields", "SmvOpts", "TrgOps", "SamplesPerSec",
        "SmpRate", "SecPerSamples",
    ),
)

_TAG_SET = frozenset(SCL_TAGS)

# Child sequences shared by the schema's abstract types
S_BASE_NAME = ("Text", "Private")
S_NAMING = S_BASE_NAME
S_UN_NAMING = S_BASE_NAME
S_ID_NAMING = S_BASE_NAME

S_ABSTRACT_DATA_ATTRIBUTE = S_UN_NAMING + ("Val",)
S_LNODE_CONTAINER = S_NAMING + ("LNode",)
S_POWER_SYSTEM_RESOURCE = S_LNODE_CONTAINER
S_EQUIPMENT = S_POWER_SYSTEM_RESOURCE
S_EQUIPMENT_CONTAINER = S_POWER_SYSTEM_RESOURCE + ("PowerTransformer", "GeneralEquipment")
S_ABSTRACT_CONDUCTING_EQUIPMENT = S_EQUIPMENT + ("Terminal", "SubEquipment")
S_CONTROL_BLOCK = S_UN_NAMING + ("Address",)
S_CONTROL = S_NAMING
S_CONTROL_WITH_IED_NAME = S_CONTROL + ("IEDName",)
S_ANY_LN = S_UN_NAMING + ("DataSet", "ReportControl", "LogControl", "DOI", "Inputs", "Log")
S_GENERAL_EQUIPMENT_CONTAINER = S_POWER_SYSTEM_RESOURCE + ("GeneralEquipment", "Function")
S_CONTROL_WITH_TRIGGER_OPT = S_CONTROL + ("TrgOps",)
S_ABSTRACT_EQ_FUNC_SUB_FUNC = S_POWER_SYSTEM_RESOURCE + ("GeneralEquipment", "EqSubFunction")

# Containers whose children may appear in any order
UNORDERED_CONTAINERS = frozenset({"Services", "SettingGroups"})

F = Family

_SCHEMA: Dict[str, TagSchema] = {
    "AccessControl": TagSchema(F.SINGLETON, ("LDevice",), ()),
    "AccessPoint": TagSchema(
        F.NAMING,
        ("IED",),
        S_NAMING + ("Server", "LN", "ServerAt", "Services", "GOOSESecurity", "SMVSecurity"),
    ),
    "Address": TagSchema(F.SINGLETON, ("ConnectedAP", "GSE", "SMV"), ("P",)),
    "Association": TagSchema(F.ASSOCIATION, ("Server",), ()),
    "Authentication": TagSchema(F.SINGLETON, ("Server",), ()),
    "BDA": TagSchema(F.NAMING, ("DAType",), S_ABSTRACT_DATA_ATTRIBUTE),
    "BitRate": TagSchema(F.SINGLETON, ("SubNetwork",), ()),
    "Bay": TagSchema(
        F.NAMING,
        ("VoltageLevel",),
        S_EQUIPMENT_CONTAINER + ("ConductingEquipment", "ConnectivityNode", "Function"),
    ),
    "ClientLN": TagSchema(F.CLIENT_LN, ("RptEnabled",), ()),
    "ClientServices": TagSchema(F.SINGLETON, ("Services",), ("TimeSyncProt", "McSecurity")),
    "CommProt": TagSchema(F.SINGLETON, ("Services",), ()),
    "Communication": TagSchema(F.SINGLETON, ("SCL",), S_UN_NAMING + ("SubNetwork",)),
    "ConductingEquipment": TagSchema(
        F.NAMING,
        ("Process", "Line", "SubFunction", "Function", "Bay"),
        S_ABSTRACT_CONDUCTING_EQUIPMENT + ("EqFunction",),
    ),
    "ConfDataSet": TagSchema(F.SINGLETON, ("Services",), ()),
    "ConfLdName": TagSchema(F.SINGLETON, ("Services",), ()),
    "ConfLNs": TagSchema(F.SINGLETON, ("Services",), ()),
    "ConfLogControl": TagSchema(F.SINGLETON, ("Services",), ()),
    "ConfReportControl": TagSchema(F.SINGLETON, ("Services",), ()),
    "ConfSG": TagSchema(F.SINGLETON, ("SettingGroups",), ()),
    "ConfSigRef": TagSchema(F.SINGLETON, ("Services",), ()),
    "ConnectedAP": TagSchema(
        F.CONNECTED_AP,
        ("SubNetwork",),
        S_UN_NAMING + ("Address", "GSE", "SMV", "PhysConn"),
    ),
    "ConnectivityNode": TagSchema(F.NAMING, ("Bay", "Line"), S_LNODE_CONTAINER),
    "DA": TagSchema(F.NAMING, ("DOType",), S_ABSTRACT_DATA_ATTRIBUTE + ("ProtNs",)),
    "DAI": TagSchema(F.IX_NAMING, ("DOI", "SDI"), S_UN_NAMING + ("Val",)),
    "DAType": TagSchema(F.ID_NAMING, ("DataTypeTemplates",), S_ID_NAMING + ("BDA", "ProtNs")),
    "DO": TagSchema(F.NAMING, ("LNodeType",), S_UN_NAMING),
    "DOI": TagSchema(F.NAMING, T_ANY_LN, S_UN_NAMING + ("SDI", "DAI")),
    "DOType": TagSchema(F.ID_NAMING, ("DataTypeTemplates",), S_ID_NAMING + ("SDO", "DA")),
    "DataObjectDirectory": TagSchema(F.SINGLETON, ("Services",), ()),
    "DataSet": TagSchema(F.NAMING, T_ANY_LN, S_NAMING + ("FCDA",)),
    "DataSetDirectory": TagSchema(F.SINGLETON, ("Services",), ()),
    "DataTypeTemplates": TagSchema(
        F.SINGLETON, ("SCL",), ("LNodeType", "DOType", "DAType", "EnumType")
    ),
    "DynAssociation": TagSchema(F.SINGLETON, ("Services",), ()),
    "DynDataSet": TagSchema(F.SINGLETON, ("Services",), ()),
    "EnumType": TagSchema(F.ID_NAMING, ("DataTypeTemplates",), S_ID_NAMING + ("EnumVal",)),
    "EnumVal": TagSchema(F.ENUM_VAL, ("EnumType",), ()),
    "EqFunction": TagSchema(
        F.NAMING,
        (
            "GeneralEquipment", "TapChanger", "TransformerWinding",
            "PowerTransformer", "SubEquipment", "ConductingEquipment",
        ),
        S_ABSTRACT_EQ_FUNC_SUB_FUNC,
    ),
    "EqSubFunction": TagSchema(
        F.NAMING, ("EqSubFunction", "EqFunction"), S_ABSTRACT_EQ_FUNC_SUB_FUNC
    ),
    "ExtRef": TagSchema(F.EXT_REF, ("Inputs",), ()),
    "FCDA": TagSchema(F.FCDA, ("DataSet",), ()),
    "FileHandling": TagSchema(F.SINGLETON, ("Services",), ()),
    "Function": TagSchema(
        F.NAMING,
        ("Bay", "VoltageLevel", "Substation", "Process", "Line"),
        S_POWER_SYSTEM_RESOURCE + ("SubFunction", "GeneralEquipment", "ConductingEquipment"),
    ),
    "GeneralEquipment": TagSchema(
        F.NAMING,
        ("SubFunction", "Function")
        + T_GENERAL_EQUIPMENT_CONTAINER
        + T_ABSTRACT_EQ_FUNC_SUB_FUNC
        + T_EQUIPMENT_CONTAINER,
        S_EQUIPMENT + ("EqFunction",),
    ),
    "GetCBValues": TagSchema(F.SINGLETON, ("Services",), ()),
    "GetDataObjectDefinition": TagSchema(F.SINGLETON, ("Services",), ()),
    "GetDataSetValue": TagSchema(F.SINGLETON, ("Services",), ()),
    "GetDirectory": TagSchema(F.SINGLETON, ("Services",), ()),
    "GOOSE": TagSchema(F.SINGLETON, ("Services",), ()),
    "GOOSESecurity": TagSchema(F.NAMING, ("AccessPoint",), S_NAMING + ("Subject", "IssuerName")),
    "GSE": TagSchema(F.CONTROL_BLOCK, ("ConnectedAP",), S_CONTROL_BLOCK + ("MinTime", "MaxTime")),
    "GSEDir": TagSchema(F.SINGLETON, ("Services",), ()),
    "GSEControl": TagSchema(F.NAMING, ("LN0",), S_CONTROL_WITH_IED_NAME + ("Protocol",)),
    "GSESettings": TagSchema(F.SINGLETON, ("Services",), ("McSecurity",)),
    "GSSE": TagSchema(F.SINGLETON, ("Services",), ()),
    "Header": TagSchema(F.SINGLETON, ("SCL",), ("Text", "History")),
    "History": TagSchema(F.SINGLETON, ("Header",), ("Hitem",)),
    "Hitem": TagSchema(F.HITEM, ("History",), ()),
    "IED": TagSchema(F.NAMING, ("SCL",), S_UN_NAMING + ("Services", "AccessPoint", "KDC")),
    "IEDName": TagSchema(F.IED_NAME, ("GSEControl", "SampledValueControl"), ()),
    "Inputs": TagSchema(F.SINGLETON, T_ANY_LN, S_UN_NAMING + ("ExtRef",)),
    "IssuerName": TagSchema(F.SINGLETON, ("GOOSESecurity", "SMVSecurity"), ()),
    "KDC": TagSchema(F.KDC, ("IED",), ()),
    "LDevice": TagSchema(F.LDEVICE, ("Server",), S_UN_NAMING + ("LN0", "LN", "AccessControl")),
    "LN": TagSchema(F.LN, ("AccessPoint", "LDevice"), S_ANY_LN),
    "LN0": TagSchema(
        F.SINGLETON,
        ("LDevice",),
        S_ANY_LN + ("GSEControl", "SampledValueControl", "SettingControl"),
    ),
    "LNode": TagSchema(F.LNODE, T_LNODE_CONTAINER, S_UN_NAMING),
    "LNodeType": TagSchema(F.ID_NAMING, ("DataTypeTemplates",), S_ID_NAMING + ("DO",)),
    "Line": TagSchema(
        F.NAMING,
        ("Process", "SCL"),
        S_GENERAL_EQUIPMENT_CONTAINER + ("Voltage", "ConductingEquipment", "ConnectivityNode"),
    ),
    "Log": TagSchema(F.NAMING, T_ANY_LN, S_UN_NAMING),
    "LogControl": TagSchema(F.NAMING, T_ANY_LN, S_CONTROL_WITH_TRIGGER_OPT),
    "LogSettings": TagSchema(F.SINGLETON, ("Services",), ()),
    "MaxTime": TagSchema(F.SINGLETON, ("GSE",), ()),
    "McSecurity": TagSchema(F.SINGLETON, ("GSESettings", "SMVSettings", "ClientServices"), ()),
    "MinTime": TagSchema(F.SINGLETON, ("GSE",), ()),
    "NeutralPoint": TagSchema(F.TERMINAL, ("TransformerWinding",), S_UN_NAMING),
    "OptFields": TagSchema(F.SINGLETON, ("ReportControl",), ()),
    "P": TagSchema(F.P, ("Address", "PhysConn"), ()),
    "PhysConn": TagSchema(F.PHYS_CONN, ("ConnectedAP",), S_UN_NAMING + ("P",)),
    "PowerTransformer": TagSchema(
        F.NAMING,
        T_EQUIPMENT_CONTAINER,
        S_EQUIPMENT + ("TransformerWinding", "SubEquipment", "EqFunction"),
    ),
    "Private": TagSchema(F.PRIVATE, (), ()),
    "Process": TagSchema(
        F.NAMING,
        ("Process", "SCL"),
        S_GENERAL_EQUIPMENT_CONTAINER + ("ConductingEquipment", "Substation", "Line", "Process"),
    ),
    "ProtNs": TagSchema(F.PROT_NS, ("DAType", "DA"), ()),
    "Protocol": TagSchema(F.SINGLETON, ("GSEControl", "SampledValueControl"), ()),
    "ReadWrite": TagSchema(F.SINGLETON, ("Services",), ()),
    "RedProt": TagSchema(F.SINGLETON, ("Services",), ()),
    "ReportControl": TagSchema(
        F.NAMING, T_ANY_LN, S_CONTROL_WITH_TRIGGER_OPT + ("OptFields", "RptEnabled")
    ),
    "ReportSettings": TagSchema(F.SINGLETON, ("Services",), ()),
    "RptEnabled": TagSchema(F.SINGLETON, ("ReportControl",), S_UN_NAMING + ("ClientLN",)),
    "SamplesPerSec": TagSchema(F.SINGLETON, ("SMVSettings",), ()),
    "SampledValueControl": TagSchema(
        F.NAMING, ("LN0",), S_CONTROL_WITH_IED_NAME + ("SmvOpts", "Protocol")
    ),
    "SecPerSamples": TagSchema(F.SINGLETON, ("SMVSettings",), ()),
    "SCL": TagSchema(
        F.SCL,
        (),
        S_BASE_NAME
        + ("Header", "Substation", "Communication", "IED", "DataTypeTemplates", "Line", "Process"),
    ),
    "SDI": TagSchema(F.IX_NAMING, ("DOI", "SDI"), S_UN_NAMING + ("SDI", "DAI")),
    "SDO": TagSchema(F.NAMING, ("DOType",), S_NAMING),
    "Server": TagSchema(
        F.SINGLETON, ("AccessPoint",), S_UN_NAMING + ("Authentication", "LDevice", "Association")
    ),
    "ServerAt": TagSchema(F.SINGLETON, ("AccessPoint",), S_UN_NAMING),
    "Services": TagSchema(
        F.SINGLETON,
        ("IED", "AccessPoint"),
        (
            "DynAssociation", "SettingGroups", "GetDirectory",
            "GetDataObjectDefinition", "DataObjectDirectory", "GetDataSetValue",
            "SetDataSetValue", "DataSetDirectory", "ConfDataSet", "DynDataSet",
            "ReadWrite", "TimerActivatedControl", "ConfReportControl",
            "GetCBValues", "ConfLogControl", "ReportSettings", "LogSettings",
            "GSESettings", "SMVSettings", "GSEDir", "GOOSE", "GSSE", "SMVsc",
            "FileHandling", "ConfLNs", "ClientServices", "ConfLdName",
            "SupSubscription", "ConfSigRef", "ValueHandling", "RedProt",
            "TimeSyncProt", "CommProt",
        ),
    ),
    "SetDataSetValue": TagSchema(F.SINGLETON, ("Services",), ()),
    "SettingControl": TagSchema(F.SINGLETON, ("LN0",), S_UN_NAMING),
    "SettingGroups": TagSchema(F.SINGLETON, ("Services",), ("SGEdit", "ConfSG")),
    "SGEdit": TagSchema(F.SINGLETON, ("SettingGroups",), ()),
    "SmpRate": TagSchema(F.SINGLETON, ("SMVSettings",), ()),
    "SMV": TagSchema(F.CONTROL_BLOCK, ("ConnectedAP",), S_CONTROL_BLOCK),
    "SmvOpts": TagSchema(F.SINGLETON, ("SampledValueControl",), ()),
    "SMVsc": TagSchema(F.SINGLETON, ("Services",), ()),
    "SMVSecurity": TagSchema(F.NAMING, ("AccessPoint",), S_NAMING + ("Subject", "IssuerName")),
    "SMVSettings": TagSchema(
        F.SINGLETON, ("Services",), ("SmpRate", "SamplesPerSec", "SecPerSamples", "McSecurity")
    ),
    "SubEquipment": TagSchema(
        F.NAMING,
        ("TapChanger", "PowerTransformer") + T_ABSTRACT_CONDUCTING_EQUIPMENT,
        S_POWER_SYSTEM_RESOURCE + ("EqFunction",),
    ),
    "SubFunction": TagSchema(
        F.NAMING,
        ("SubFunction", "Function"),
        S_POWER_SYSTEM_RESOURCE + ("GeneralEquipment", "ConductingEquipment", "SubFunction"),
    ),
    "SubNetwork": TagSchema(F.NAMING, ("Communication",), S_NAMING + ("BitRate", "ConnectedAP")),
    "Subject": TagSchema(F.SINGLETON, ("GOOSESecurity", "SMVSecurity"), ()),
    "Substation": TagSchema(
        F.NAMING, ("SCL", "Process"), S_EQUIPMENT_CONTAINER + ("VoltageLevel", "Function")
    ),
    "SupSubscription": TagSchema(F.SINGLETON, ("Services",), ()),
    "TapChanger": TagSchema(
        F.NAMING,
        ("TransformerWinding",),
        S_POWER_SYSTEM_RESOURCE + ("SubEquipment", "EqFunction"),
    ),
    "Terminal": TagSchema(F.TERMINAL, T_ABSTRACT_CONDUCTING_EQUIPMENT, S_UN_NAMING),
    "TimerActivatedControl": TagSchema(F.SINGLETON, ("Services",), ()),
    "TimeSyncProt": TagSchema(F.SINGLETON, ("Services", "ClientServices"), ()),
    "TransformerWinding": TagSchema(
        F.NAMING,
        ("PowerTransformer",),
        S_ABSTRACT_CONDUCTING_EQUIPMENT + ("TapChanger", "NeutralPoint", "EqFunction"),
    ),
    "TrgOps": TagSchema(F.SINGLETON, T_CONTROL_WITH_TRIGGER_OPT, ()),
    "Val": TagSchema(F.VAL, ("DAI", "DA", "BDA"), ()),
    "ValueHandling": TagSchema(F.SINGLETON, ("Services",), ()),
    "Voltage": TagSchema(F.SINGLETON, ("VoltageLevel", "Line"), ()),
    "VoltageLevel": TagSchema(
        F.NAMING,
        ("Substation",),
        S_EQUIPMENT_CONTAINER + ("Voltage", "Bay", "Function"),
    ),
}

# Text annotates every element whose content model lists it
_SCHEMA["Text"] = TagSchema(
    F.SINGLETON,
    tuple(tag for tag in SCL_TAGS if tag != "Text" and "Text" in _SCHEMA[tag].children),
    (),
)

SCHEMA = MappingProxyType(_SCHEMA)


def is_scl_tag(tag) -> bool:
    return tag in _TAG_SET


def family_of(tag: str) -> Family:
    return SCHEMA[tag].family


def parents_of(tag: str) -> Tuple[str, ...]:
    return SCHEMA[tag].parents


def children_of(tag: str) -> Tuple[str, ...]:
    return SCHEMA[tag].children
