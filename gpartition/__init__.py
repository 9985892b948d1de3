from gpartition.gptypes import Comparer, KeyedGroup
from gpartition.gpartition import (
    casefold_comparer, comparer_from_key,
    partition, partition_bool, partition_optional_bool
)
from gpartition.grouping import Grouping, group_by, groupings
