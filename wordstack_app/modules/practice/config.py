# File: wordstack_app/modules/practice/config.py

class PracticeModuleDefaultConfig:
    PRACTICE_DEFAULT_QUIZ_OPTIONS = 4
    PRACTICE_DEFAULT_SESSION_ID = 'default'
    PRACTICE_SESSION_HEADER = 'X-Practice-Session'
    # Learner sessions kept in memory; least recently used are evicted
    PRACTICE_MAX_SESSIONS = 256
