from .closest import closest
from .predicates import is_node_focusable, is_direction_and_orientation_matching, get_direction_for_key_code, resolve_key_event
from .paths import PATH_DELIMITER, is_node_in_path, is_node_in_paths, build_path
from .tree import is_node_in_tree, get_nodes_from_tree
from .index_resolver import find_child_with_index, find_child_with_matching_index_range, find_child_with_closest_index
from .overrides import find_override, get_override_target
from .arena import FocusTreeIndex
