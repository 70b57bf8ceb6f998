"""
Prompt construction for note analysis.

Four logical variants: one per mode without spec context, plus one
context-aware variant used whenever a spec document is present. The
context-aware variant still adjusts its emphasis by mode.
"""

from dictanote.models.note import AnalysisMode
from dictanote.models.spec_file import SpecFile

# Bump when prompt output format changes; stored on every NoteAnalysis.
PROMPT_VERSION = 1

MODE_FOCUS: dict[AnalysisMode, str] = {
    AnalysisMode.TECHNICAL: "Focus on technical decisions and architectural changes.",
    AnalysisMode.ACTIONS: "Focus on action items, owners and deadlines.",
    AnalysisMode.SUMMARY: "Give a complete summary of the meeting.",
}

BASE_PROMPT = """You are an experienced meeting analyst. Pull the final decisions out of a transcript and leave the brainstorming behind.

Rules:
- Skip tentative language ("maybe we could", "I think", "what if")
- Keep only decisions the speakers agreed on
- Call out technical decisions and architectural changes
- Drop exploratory discussion

Answer in Markdown using these sections:

## Decisions
- [PRIORITY] Decision title
  - Description

## Architectural Changes
- Change description
  - Impact and rationale"""

SPEC_CONTEXT_PROMPT = """You are an experienced meeting analyst working alongside the project's specification document.

Steps:
1. Read the meeting transcript
2. Check each decision against the specification
3. Find places where the specification conflicts with the meeting or needs updating
4. Propose concrete specification edits and cite the section they touch (e.g. "Section 3.1: switch the cache from MySQL to Redis")

Answer in Markdown using these sections:

## Spec Updates
One block per proposed edit:
### Section X.Y: Section Title (Line N)
**Change**: Add | Modify | Remove | Replace
**Confidence**: High | Medium | Low
**Current**: "excerpt of the current text"
**Suggested**: "proposed text"
**Reason**: "what in the transcript motivates it"

## Decisions
- [PRIORITY] Decision title (Section X.Y when relevant)
  - Description

## Action Items
- [Owner] Task description"""


def has_spec_context(spec_file: SpecFile | None) -> bool:
    return spec_file is not None and spec_file.exists


def build_system_prompt(mode: AnalysisMode, spec_file: SpecFile | None = None) -> str:
    """
    Choose the system prompt for a mode and optional spec context.

    Args:
        mode: Analysis mode
        spec_file: Spec document; ignored unless exists=True

    Returns:
        System prompt text
    """
    mode = AnalysisMode(mode)

    if has_spec_context(spec_file):
        return f"{SPEC_CONTEXT_PROMPT}\n\nEmphasis: {MODE_FOCUS[mode]}"

    sections = [BASE_PROMPT, MODE_FOCUS[mode]]
    if mode == AnalysisMode.TECHNICAL:
        sections.append("## Action Items (if any)\n- [Owner] Task description")
    return "\n\n".join(sections)


def build_user_message(transcript: str, spec_file: SpecFile | None = None) -> str:
    """
    Embed the note text, and the spec text when present, in the user turn.

    Args:
        transcript: Note content
        spec_file: Spec document; ignored unless exists=True

    Returns:
        User message text
    """
    if has_spec_context(spec_file):
        return (
            "Analyze this transcript with the following project specification as context:\n\n"
            f"{spec_file.content}\n\n---\n\nTranscript to analyze:\n\n{transcript}"
        )
    return f"Analyze this transcript and extract final decisions:\n\n{transcript}"
