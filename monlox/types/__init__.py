from monlox.types.objects import (
    ObjectType, MonloxObject, HashKey, HashPair,
    Number, Boolean, String, Null, Array, Hash,
    Function, Builtin, ReturnValue, Error,
    TRUE, FALSE, NULL, native_bool, new_error, is_error,
)
from monlox.types.environment import Environment
