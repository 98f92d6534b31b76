"""Build the analysis prompt from a report name and uploaded CSV files"""

from typing import Protocol, Sequence


class NamedContent(Protocol):
    name: str
    content: str


# System prompt for chat-style providers
SYSTEM_PROMPT = (
    "You are a Senior Performance Testing Expert. Analyze the provided performance "
    "test data and generate comprehensive reports."
)

ANALYSIS_PROMPT_TEMPLATE = """You are acting as a Senior Performance Tester.
I will provide you with multiple CSV files containing performance test results from different runs.

Your tasks:
1. Analyze all the CSV files collectively.
2. Identify key performance metrics such as response time, throughput, error rate, latency, resource utilization, and trends across runs.
3. Highlight bottlenecks, anomalies, or significant variations between test runs.
4. Consolidate findings into a single final performance report that:
   - Summarizes overall system performance.
   - Compares and contrasts metrics across runs.
   - Highlights improvements, regressions, and stability issues.
   - Provides root cause insights where possible.
   - Gives actionable recommendations for developers and stakeholders.

Format the output report in a **professional, structured manner** with the following sections:
- **Executive Summary**
- **Key Observations & Trends**
- **Bottlenecks & Issues Identified**
- **Comparison Across Runs**
- **Recommendations & Next Steps**

Write the report as if you are delivering it to senior management and technical teams. Keep it detailed, insightful, and practical.

Report title: {report_name}

Here are the CSV file contents:
"""


def format_file_block(index: int, name: str, content: str) -> str:
    """Format one file with its boundary marker (index is 1-based)"""
    return f"\n=== CSV File {index}: {name} ===\n{content}\n"


def compose_prompt(report_name: str, files: Sequence[NamedContent]) -> str:
    """
    Compose the full instruction payload.

    File contents are included verbatim and in input order; nothing is
    truncated here.

    Args:
        report_name: Name of the report being generated
        files: Uploaded files, each with ``name`` and ``content``

    Returns:
        Prompt text
    """
    header = ANALYSIS_PROMPT_TEMPLATE.format(report_name=report_name)
    blocks = [
        format_file_block(index, file.name, file.content)
        for index, file in enumerate(files, start=1)
    ]
    return header + "\n" + "\n".join(blocks)
