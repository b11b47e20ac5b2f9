from lis.types.symbol import Symbol
from lis.types.environment import Environment
from lis.types.user_procedure import UserProcedure

__all__ = ["Symbol", "Environment", "UserProcedure"]
