from tasklens.schemas.task import Priority, Task, normalize_tasks
from tasklens.schemas.metrics import (
    DateRange,
    Direction,
    Metrics,
    MetricsRequest,
    MetricsResponse,
    NavigateRequest,
    NavigateResponse,
    PriorityBreakdown,
    PriorityCount,
    RangeMode,
)
from tasklens.schemas.streak import (
    StreakGoalsUpdate,
    StreakRecomputeRequest,
    StreakState,
    StreakSummary,
)
