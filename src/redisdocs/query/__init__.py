from .evaluator import match_query, MISSING
from .scanner import CancellationToken, FullScanner, Scanner, ScanResult, ScanWarning
from .builder import QueryBuilder

__all__ = [
    'match_query', 'MISSING',
    'CancellationToken', 'FullScanner', 'Scanner', 'ScanResult', 'ScanWarning',
    'QueryBuilder',
]
