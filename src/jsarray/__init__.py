"""JavaScript array methods, re-implemented in Python.

Usage:
	from jsarray import JsArray, map_, reduce, push, sort

	map_([1, 2, 3], lambda x: x * 2)            # -> [2, 4, 6]
	reduce([1, 2, 3], lambda acc, x: acc + x)  # -> 6

	sparse = JsArray.sparse(3, {0: "a", 2: "c"})
	map_(sparse, str.upper)                    # -> JsArray(['A', <1 empty item>, 'C'])

	stack = [1, 2]
	push(stack, 3)                             # -> 3, and stack is now [1, 2, 3]
	sort([10, 9, 1])                           # -> [1, 10, 9]
"""

# Containers and sentinels
from jsarray._core import HOLE as HOLE
from jsarray._core import UNDEFINED as UNDEFINED
from jsarray._core import ArrayInput as ArrayInput
from jsarray._core import ArrayLike as ArrayLike
from jsarray._core import Hole as Hole
from jsarray._core import JsArray as JsArray
from jsarray._core import ListView as ListView
from jsarray._core import Undefined as Undefined
from jsarray._core import as_array as as_array

# Callbacks
from jsarray.callbacks import bind_callback as bind_callback

# Config
from jsarray.config import ENV_JSARRAY_NARRATE as ENV_JSARRAY_NARRATE
from jsarray.config import ENV_JSARRAY_SORT as ENV_JSARRAY_SORT
from jsarray.config import SortAlgorithm as SortAlgorithm

# Errors
from jsarray.errors import InvalidArrayLengthError as InvalidArrayLengthError
from jsarray.errors import JsArrayError as JsArrayError
from jsarray.errors import NotCallableError as NotCallableError
from jsarray.errors import ReduceOfEmptyArrayError as ReduceOfEmptyArrayError

# Iteration
from jsarray.iteration import MISSING as MISSING
from jsarray.iteration import every as every
from jsarray.iteration import filter_ as filter_
from jsarray.iteration import for_each as for_each
from jsarray.iteration import map_ as map_
from jsarray.iteration import reduce as reduce
from jsarray.iteration import reduce_right as reduce_right
from jsarray.iteration import some as some

# Mutators
from jsarray.mutators import fill as fill
from jsarray.mutators import pop as pop
from jsarray.mutators import push as push
from jsarray.mutators import shift as shift
from jsarray.mutators import unshift as unshift

# Narration
from jsarray.narrate import DryRun as DryRun
from jsarray.narrate import Step as Step
from jsarray.narrate import narrate as narrate

# Search
from jsarray.search import find as find
from jsarray.search import find_index as find_index
from jsarray.search import find_last as find_last
from jsarray.search import find_last_index as find_last_index
from jsarray.search import includes as includes
from jsarray.search import index_of as index_of

# Sorting
from jsarray.sorting import Comparator as Comparator
from jsarray.sorting import compare_default as compare_default
from jsarray.sorting import sort as sort

# Values
from jsarray.values import same_value_zero as same_value_zero
from jsarray.values import strict_equals as strict_equals
from jsarray.values import to_js_string as to_js_string

__version__ = "0.1.0"
