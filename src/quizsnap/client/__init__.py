# src/quizsnap/client/__init__.py

from src.quizsnap.client.controller import FlowController, RelayRequestError
from src.quizsnap.client.state import Phase, ResultSummary, SessionState
