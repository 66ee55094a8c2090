"""Import functions for sequencing and trimming path segments planned over surfaces."""

from .endpoints import SegmentEndpoints as SegmentEndpoints
from .endpoints import project_endpoints as project_endpoints
from .margins import MarginInvariantError as MarginInvariantError
from .margins import apply_margins as apply_margins
from .margins import trim_segment as trim_segment
from .reference_frame import estimate_reference_frame as estimate_reference_frame
from .reference_frame import longest_segment_index as longest_segment_index
from .segments import PathSegment as PathSegment
from .sequencing import reconstruct_sequence as reconstruct_sequence
from .sequencing import sequence as sequence
from .tours import TourStep as TourStep
from .tours import build_tour as build_tour
