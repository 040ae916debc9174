from __future__ import annotations

from pharmavault.models.comparison import ComparisonResult
from pharmavault.utils.parsing import format_rupees, round_half_up

COMPARISON_NOTICE = (
    "**Important:** This comparison is for informational purposes only. Always "
    "consult with a healthcare professional before making medication decisions."
)


def generate_comparison_report(result: ComparisonResult) -> str:
    """비교 결과를 마크다운 보고서로 렌더링

    요약 표는 종합 점수 내림차순(동점은 입력 순서)으로 정렬하고, 상세 분석은
    입력 순서를 따른다. 원본 결과 목록은 변경하지 않는다.

    Args:
        result: 비교 결과

    Returns:
        마크다운 문자열
    """
    medicines = {med.id: med for med in result.medicines}
    lines = [
        "**Medicine Comparison Report**",
        "",
        "**Comparison Summary:**",
        "| Medicine | Overall Score | Price | Availability |",
        "|----------|---------------|-------|-------------|",
    ]
    ranked = sorted(result.results, key=lambda metric: metric.scores.overall, reverse=True)
    for metric in ranked:
        medicine = medicines[metric.medicine_id]
        stock = "✅" if medicine.in_stock else "❌"
        lines.append(
            f"| {medicine.name} | {round_half_up(metric.scores.overall)}% | "
            f"{format_rupees(medicine.price)} | {stock} |"
        )

    lines.extend(["", "**Detailed Analysis:**", ""])
    for metric in result.results:
        medicine = medicines[metric.medicine_id]
        lines.append(f"**{medicine.name}** ({medicine.generic_name})")
        lines.append(f"Overall Score: {round_half_up(metric.scores.overall)}%")
        lines.append("")
        if metric.pros:
            lines.append("**Advantages:**")
            lines.extend(f"• {pro}" for pro in metric.pros)
            lines.append("")
        if metric.cons:
            lines.append("**Disadvantages:**")
            lines.extend(f"• {con}" for con in metric.cons)
            lines.append("")
        lines.append(f"**Recommendation:** {metric.recommendation.text}")
        lines.append("")
        lines.append("---")
        lines.append("")

    lines.append(COMPARISON_NOTICE)
    return "\n".join(lines)
