# File: practice/routes/api.py
# Practice - JSON API Endpoints
#
# Every view runs inside ``_session_scope()`` so requests against one learner
# session are serialized by that session's lock.

from flask import current_app, jsonify, request

from . import practice_api_bp
from wordstack_app.core.error_handlers import InvalidArgumentError, NotFoundError, success_response
from wordstack_app.modules.corpus.services.corpus_loader import split_corpus_text

from ..config import PracticeModuleDefaultConfig
from ..schemas import (
    KeystrokeRequest,
    ListeningStartRequest,
    LoadCorpusRequest,
    MasteryIdsRequest,
    QuizAnswerRequest,
    QuizStartRequest,
    parse_payload,
)


def _session_id():
    session_id = (
        request.headers.get(PracticeModuleDefaultConfig.PRACTICE_SESSION_HEADER)
        or PracticeModuleDefaultConfig.PRACTICE_DEFAULT_SESSION_ID
    ).strip()
    if not session_id or len(session_id) > 64:
        raise InvalidArgumentError('Invalid session id')
    return session_id


def _registry():
    return current_app.extensions['wordstack_sessions']


def _session_scope():
    """Resolve the caller's PracticeSession from the session header, locked."""
    return _registry().session(_session_id())


def _entry_or_none(entry):
    return entry.to_dict() if entry is not None else None


def _query_int(name, default=None):
    raw = request.args.get(name)
    if raw is None:
        if default is None:
            raise InvalidArgumentError(f"Missing query parameter '{name}'")
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"Query parameter '{name}' must be an integer", errors={name: raw})


# ── session ──────────────────────────────────────────────────────────


@practice_api_bp.route('/session', methods=['DELETE'])
def api_drop_session():
    """Forget the in-memory session; persisted mastery is kept."""
    dropped = _registry().drop(_session_id())
    return jsonify(success_response({'dropped': dropped}))


# ── corpus ───────────────────────────────────────────────────────────


@practice_api_bp.route('/corpus', methods=['GET'])
def api_corpus_summary():
    with _session_scope() as session:
        return jsonify(success_response(session.summary()))


@practice_api_bp.route('/corpus', methods=['POST'])
def api_load_corpus():
    """Load entries from JSON rows or raw tab-separated text."""
    payload = parse_payload(LoadCorpusRequest, request.get_json(silent=True))
    rows = payload.rows if payload.rows is not None else split_corpus_text(payload.text)
    with _session_scope() as session:
        added = session.load_corpus(rows)
    current_app.logger.info(f"[PRACTICE] Loaded {added} entries from request body")
    return jsonify(success_response({'added': added}))


@practice_api_bp.route('/corpus/file', methods=['POST'])
def api_load_corpus_file():
    """Load the configured corpus file into the session."""
    path = current_app.config.get('WORDSTACK_CORPUS_PATH')
    if not path:
        raise NotFoundError('No corpus file configured', resource='corpus')
    with _session_scope() as session:
        try:
            added = session.load_corpus_file(path)
        except FileNotFoundError:
            raise NotFoundError('Corpus file not found', resource='corpus')
    return jsonify(success_response({'added': added}))


@practice_api_bp.route('/search', methods=['GET'])
def api_search():
    level = _query_int('level', default=0)
    with _session_scope() as session:
        entries = session.search(level)
    return jsonify(success_response([entry.to_dict() for entry in entries]))


# ── mastery ──────────────────────────────────────────────────────────


@practice_api_bp.route('/mastery', methods=['GET'])
def api_get_mastery():
    with _session_scope() as session:
        return jsonify(success_response({'ids': session.store.mastered_ids}))


@practice_api_bp.route('/mastery', methods=['PUT'])
def api_set_mastery():
    payload = parse_payload(MasteryIdsRequest, request.get_json(silent=True))
    with _session_scope() as session:
        result = session.set_mastery_ids(payload.ids)
    return jsonify(success_response(result.to_dict()))


@practice_api_bp.route('/mastery', methods=['DELETE'])
def api_clear_mastery():
    with _session_scope() as session:
        size = session.clear_mastered()
    return jsonify(success_response({'size': size}))


@practice_api_bp.route('/mastery/<int:entry_id>', methods=['POST'])
def api_mark_mastered(entry_id):
    with _session_scope() as session:
        size = session.mark_mastered(entry_id)
    return jsonify(success_response({'size': size}))


@practice_api_bp.route('/mastery/<int:entry_id>', methods=['DELETE'])
def api_unmark_mastered(entry_id):
    with _session_scope() as session:
        size = session.unmark_mastered(entry_id)
    return jsonify(success_response({'size': size}))


# ── listening ────────────────────────────────────────────────────────


@practice_api_bp.route('/listening/start', methods=['POST'])
def api_start_listening():
    payload = parse_payload(ListeningStartRequest, request.get_json(silent=True))
    with _session_scope() as session:
        size = session.start_listening(payload.level)
    return jsonify(success_response({'size': size, 'level': payload.level}))


@practice_api_bp.route('/listening/next', methods=['GET'])
def api_next_listening():
    with _session_scope() as session:
        entry = session.next_listening_item()
    message = None if entry is not None else 'No content available'
    return jsonify(success_response({'item': _entry_or_none(entry)}, message=message))


# ── quiz ─────────────────────────────────────────────────────────────


@practice_api_bp.route('/quiz/start', methods=['POST'])
def api_start_quiz():
    payload = parse_payload(QuizStartRequest, request.get_json(silent=True))
    with _session_scope() as session:
        size = session.start_quiz(payload.level, payload.options_count)
    return jsonify(success_response({
        'size': size,
        'level': payload.level,
        'options_count': payload.options_count,
    }))


@practice_api_bp.route('/quiz/next', methods=['GET'])
def api_next_quiz():
    with _session_scope() as session:
        entry = session.next_quiz_item()
        if entry is None:
            return jsonify(success_response({'item': None, 'options': []}, message='No content available'))
        return jsonify(success_response({
            'item': entry.to_dict(),
            'options': [option.to_dict() for option in session.current_quiz_options()],
            'partial': session.quiz.is_partial,
        }))


@practice_api_bp.route('/quiz/options', methods=['GET'])
def api_quiz_options():
    with _session_scope() as session:
        options = session.current_quiz_options()
        return jsonify(success_response({
            'options': [{'id': option.id, 'jp': option.definition_ja} for option in options],
            'partial': session.quiz.is_partial,
        }))


@practice_api_bp.route('/quiz/answer', methods=['POST'])
def api_quiz_answer():
    payload = parse_payload(QuizAnswerRequest, request.get_json(silent=True))
    with _session_scope() as session:
        is_correct = session.check_quiz_answer(payload.choice_id)
        correct_id = session.quiz.current.id
    return jsonify(success_response({
        'is_correct': is_correct,
        'correct_id': correct_id,
    }))


# ── typing ───────────────────────────────────────────────────────────


@practice_api_bp.route('/typing/start', methods=['POST'])
def api_start_typing():
    with _session_scope() as session:
        size = session.start_typing()
    return jsonify(success_response({'size': size}))


@practice_api_bp.route('/typing/items/<int(signed=True):index>', methods=['GET'])
def api_typing_item(index):
    with _session_scope() as session:
        entry = session.item_at(index)
    message = None if entry is not None else 'No content available'
    return jsonify(success_response({'item': _entry_or_none(entry)}, message=message))


@practice_api_bp.route('/typing/tokens', methods=['GET'])
def api_typing_tokens():
    mode = _query_int('mode')
    with _session_scope() as session:
        tokens = session.tokens_for(mode)
    return jsonify(success_response({'tokens': tokens}))


@practice_api_bp.route('/typing/keystroke', methods=['POST'])
def api_typing_keystroke():
    payload = parse_payload(KeystrokeRequest, request.get_json(silent=True))
    with _session_scope() as session:
        new_index = session.on_keystroke(payload.input, payload.index, payload.mode)
    return jsonify(success_response({'index': new_index}))
