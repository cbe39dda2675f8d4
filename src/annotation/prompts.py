# src/annotation/prompts.py - v1
"""Annotation policy sent to the model as the system message.

The prompt, the example input/output pair and the category vocabulary are
data. Nothing here branches on them.
"""

from __future__ import annotations

from typing import Literal, get_args

HighlightCategory = Literal["positive", "negative", "context", "info"]

HIGHLIGHT_CATEGORIES: tuple[str, ...] = get_args(HighlightCategory)


def highlight_class(category: HighlightCategory) -> str:
    """CSS class carried by a highlight span of ``category``."""
    if category not in HIGHLIGHT_CATEGORIES:
        raise ValueError(f"Unknown highlight category: {category!r}")
    return f"highlight-{category}"


EXAMPLE_INPUT = """\
<div>
  <p>You will wear many hats</p>
  <p>Our team is like a family</p>
  <p>You have agency to make decisions</p>

  <p>
    <span>Perks:</span>
    <ul>
      <li>Free snacks</li>
      <li>Flexible hours</li>
      <li>Unlimited vacation</li>
      <li>Competitive salary</li>
    </ul>
  </p>
</div>"""

EXAMPLE_OUTPUT = """\
<div>
  <p><span data-highlight data-type="negative" data-description="Wearing many hats is a common description when the role is not well defined, and you may be expected to do a lot outside the job description." class="highlight-negative">You will wear many hats</span></p>
  <p><span data-highlight data-type="negative" data-description="Treating the team as a family is often used to take advantage of employees' time and ignore work/life boundaries." class="highlight-negative">Our team is like a family</span></p>
  <p><span data-highlight data-type="positive" data-description="Having agency means that you are treated with respect and trusted in the workplace." class="highlight-positive">You have agency to make decisions</span></p>

  <p>
    <span>Perks:</span>
    <ul>
      <li>Free snacks</li>
      <li>Flexible hours</li>
      <li><span data-highlight data-type="context" data-description="Unlimited vacation requires context. You might still be socially restricted from taking vacation in the workplace, and may end up with less vacation time." class="highlight-context">Unlimited vacation</span></li>
      <li><span data-highlight data-type="negative" data-description="Openly sharing pay ranges in job posts fosters transparency and builds trust that your organization pays people fairly. Keeping the salary range hidden is prone to wasting time of both applicants and recruiters time." class="highlight-negative">Competitive salary</span></li>
    </ul>
  </p>
</div>"""

SYSTEM_PROMPT = f"""
You are tasked with identifying things to look out for in a job posting.

You must identify potential red flags and green flags in the job posting. As well as things that may require additional context.

You should wrap the highlighted sections in <span> tags with the following attributes:
- data-highlight boolean value to all
- data-type any of "positive", "negative", "context" or "info"
- data-description a short description of why the text was highlighted
- class "highlight-positive", "highlight-negative", "highlight-context" or "highlight-info"

For example:
<example-input>
{EXAMPLE_INPUT}
</example-input>

You should highlight the following:
<example-output>
{EXAMPLE_OUTPUT}
</example-output>

Be creative with the data-descriptions, but make sure they are clear and concise. Keep the descriptions in the same language as the original input text.

Keep the rest of the HTML exactly as is, and make sure to keep the HTML structure intact. Only wrap parts of the text in <span> tags.

Make sure to always add at least one to three highlights! If you can't find any red flags, or green flags, add context or info highlights.
"""
