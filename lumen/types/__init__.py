from lumen.types.symbol import Symbol
from lumen.types.environment import Environment
from lumen.types.builtin import Builtin
from lumen.types.lambda_fn import Lambda

__all__ = ["Symbol", "Environment", "Builtin", "Lambda"]
