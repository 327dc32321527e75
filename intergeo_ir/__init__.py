from .archive import load_document, prepare_string
from .board import Board, BoardError
from .constraints import ConstraintDispatcher, ConstraintHandlers, read_params
from .coords import CoordinateForm, normalize_point_coords, read_coordinate_block
from .elements import ingest_elements
from .host import HostBoard, HostElement
from .model import (
    BoardSetup,
    ConstraintKind,
    ConstraintNode,
    ConstructionError,
    Diagnostic,
    ElementKind,
    ImportResult,
    IntergeoError,
    MalformedDocumentStructure,
    RawRecord,
    ReaderOptions,
    RealizedHandle,
    Style,
    UnresolvedReference,
    UnsupportedConstraintKind,
    UnsupportedCoordinateForm,
    UnsupportedElementKind,
    get_default_options,
    set_default_options,
)
from .reader import IntergeoReader, read_intergeo
from .store import PrimitiveStore, Realizer

__all__ = [
    'load_document',
    'prepare_string',
    'Board',
    'BoardError',
    'ConstraintDispatcher',
    'ConstraintHandlers',
    'read_params',
    'CoordinateForm',
    'normalize_point_coords',
    'read_coordinate_block',
    'ingest_elements',
    'HostBoard',
    'HostElement',
    'BoardSetup',
    'ConstraintKind',
    'ConstraintNode',
    'ConstructionError',
    'Diagnostic',
    'ElementKind',
    'ImportResult',
    'IntergeoError',
    'MalformedDocumentStructure',
    'RawRecord',
    'ReaderOptions',
    'RealizedHandle',
    'Style',
    'UnresolvedReference',
    'UnsupportedConstraintKind',
    'UnsupportedCoordinateForm',
    'UnsupportedElementKind',
    'get_default_options',
    'set_default_options',
    'IntergeoReader',
    'read_intergeo',
    'PrimitiveStore',
    'Realizer',
]
