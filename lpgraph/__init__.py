from .ast import Constraint, Expression, Number, Operation, Variable
from .parser import ParseError, parse_constraint, parse_expression
from .linear import LinearForm, NonLinearError, evaluate, linearize
from .projection import LineProjection, NoVariablesError, project, project_form
from .scene import Arrow, HalfPlane, Scene, build_scene, constraint_expression, half_plane, objective_arrow
from .workspace import ConstraintEntry, ObjectiveEntry, Workspace
from .printer import format_constraint, format_expression, format_linear_form
from .config import VARIABLES, ViewportConfig, get_viewport_config, set_viewport_config
from .reference import BNF

__all__ = [
    'Constraint',
    'Expression',
    'Number',
    'Operation',
    'Variable',
    'ParseError',
    'parse_constraint',
    'parse_expression',
    'LinearForm',
    'NonLinearError',
    'evaluate',
    'linearize',
    'LineProjection',
    'NoVariablesError',
    'project',
    'project_form',
    'Arrow',
    'HalfPlane',
    'Scene',
    'build_scene',
    'constraint_expression',
    'half_plane',
    'objective_arrow',
    'ConstraintEntry',
    'ObjectiveEntry',
    'Workspace',
    'format_constraint',
    'format_expression',
    'format_linear_form',
    'VARIABLES',
    'ViewportConfig',
    'get_viewport_config',
    'set_viewport_config',
    'BNF',
]
