"""
Model-backed symptom diagnosis.

Sends the symptom description to an OpenAI-compatible chat-completions API
and parses the JSON diagnosis it returns. If no API key is configured, the
request fails, or the reply carries no usable JSON, the rule-based symptom
checker answers instead so callers always get a DiagnosisResult.
"""
import json
import logging
import re
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from app.core.config import settings
from app.engines.symptom_checker import check_symptoms
from app.schemas.diagnosis import DiagnosisRequest, DiagnosisResult
from app.schemas.symptoms import SymptomQuery, TriageResult, Urgency

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert veterinary assistant specializing in livestock health.\n"
    "Analyze symptoms and provide accurate diagnoses with confidence scores.\n"
    "Always consider the species, age, and context provided.\n"
    "Format your response as JSON with the following structure:\n"
    "{\n"
    '  "predicted_disease": "disease name",\n'
    '  "confidence_score": 0.0-1.0,\n'
    '  "recommended_action": "detailed action plan",\n'
    '  "emergency_flag": true/false,\n'
    '  "vet_required": true/false,\n'
    '  "full_reasoning": "detailed explanation",\n'
    '  "suggested_treatment": "treatment recommendations",\n'
    '  "prevention_tips": ["tip1", "tip2"]\n'
    "}"
)

_SYMPTOM_SEPARATORS = re.compile(r"[,;\n]+")


def split_symptoms(text: str) -> List[str]:
    return [part.strip() for part in _SYMPTOM_SEPARATORS.split(text or "") if part.strip()]


def build_user_prompt(req: DiagnosisRequest) -> str:
    lines = [
        f"Analyze these symptoms for {req.species or 'livestock'}:",
        "",
        f"Symptoms: {req.text}",
    ]
    if req.age:
        lines.append(f"Age: {req.age}")
    if req.additional_context:
        lines.append(f"Additional Context: {req.additional_context}")
    lines.append("")
    lines.append("Provide a diagnosis with the requested JSON format.")
    return "\n".join(lines)


def _extract_text_from_choice(jresp: Dict[str, Any]) -> Optional[str]:
    try:
        c = jresp["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    if isinstance(c, list) and c:
        first = c[0]
        if isinstance(first, dict):
            return first.get("text")
        if isinstance(first, str):
            return first
    if isinstance(c, str):
        return c
    return None


def _extract_json_from_text(text: str) -> Optional[Dict[str, Any]]:
    m = re.search(r"\{.*\}", text, re.S)
    candidate = m.group(0) if m else text
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def generate_voice_reply(diagnosis: DiagnosisResult) -> str:
    reply = f"Based on the symptoms, I believe this could be {diagnosis.predicted_disease}. "
    reply += f"My confidence level is {round(diagnosis.confidence_score * 100)}%. "

    if diagnosis.emergency_flag:
        reply += "This appears to be an emergency situation. "

    if diagnosis.vet_required:
        reply += "I strongly recommend consulting a veterinarian immediately. "

    reply += diagnosis.recommended_action
    return reply


def triage_to_diagnosis(triage: TriageResult) -> DiagnosisResult:
    top = triage.possible_conditions[0]
    result = DiagnosisResult(
        predicted_disease=top.name,
        confidence_score=top.confidence,
        recommended_action=". ".join(top.recommendations) + "." if top.recommendations else triage.general_advice,
        emergency_flag=triage.urgency == Urgency.EMERGENCY,
        vet_required=triage.should_see_vet,
        full_reasoning=f"{top.description}. {triage.general_advice}",
        prevention_tips=[],
        source="rules",
    )
    result.ai_voice_reply = generate_voice_reply(result)
    return result


def rule_based_diagnosis(req: DiagnosisRequest) -> DiagnosisResult:
    query = SymptomQuery(
        species=req.species or "",
        symptoms=split_symptoms(req.text),
        age=req.age,
        severity=req.severity,
    )
    return triage_to_diagnosis(check_symptoms(query))


def request_model_diagnosis(req: DiagnosisRequest, api_key: str) -> Optional[DiagnosisResult]:
    """Call the chat-completions API; None when the reply cannot be used."""
    headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
    payload = {
        "model": settings.llm_model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(req)},
        ],
        "response_format": {"type": "json_object"},
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
    }
    url = settings.llm_base_url.rstrip("/") + "/chat/completions"

    r = requests.post(url, headers=headers, json=payload, timeout=settings.llm_timeout_seconds)
    r.raise_for_status()

    content = _extract_text_from_choice(r.json())
    if not content:
        logger.warning("diagnosis reply had no message content")
        return None

    parsed = _extract_json_from_text(content)
    if parsed is None:
        logger.warning("diagnosis reply was not JSON: %.200s", content)
        return None

    if isinstance(parsed.get("confidence_score"), (int, float)):
        parsed["confidence_score"] = min(max(float(parsed["confidence_score"]), 0.0), 1.0)
    parsed["source"] = "model"

    try:
        result = DiagnosisResult.model_validate(parsed)
    except ValidationError:
        logger.warning("diagnosis reply did not match the expected shape", exc_info=True)
        return None

    result.ai_voice_reply = generate_voice_reply(result)
    return result


def diagnose_symptom(req: DiagnosisRequest) -> DiagnosisResult:
    api_key = settings.openai_api_key
    if not api_key:
        logger.info("no LLM API key configured, using rule-based diagnosis")
        return rule_based_diagnosis(req)

    try:
        result = request_model_diagnosis(req, api_key)
    except (requests.RequestException, ValueError):
        # ValueError covers a non-JSON response body
        logger.exception("model diagnosis request failed, using rule-based diagnosis")
        result = None

    if result is None:
        return rule_based_diagnosis(req)
    return result
