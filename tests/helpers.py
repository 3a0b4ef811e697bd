from __future__ import annotations


def make_row(cid: int, display_file: str, function: str = "fn") -> dict[str, object]:
    return {
        "cid": cid,
        "displayType": "Resource leak",
        "displayImpact": "High",
        "status": "New",
        "firstDetected": "01/02/21",
        "classification": "Unclassified",
        "owner": "Unassigned",
        "severity": "Unspecified",
        "action": "Undecided",
        "displayComponent": "Other",
        "displayCategory": "Resource leaks",
        "displayFile": display_file,
        "displayFunction": function,
    }


def make_report(rows: list[dict[str, object]]) -> dict[str, object]:
    return {
        "viewContentsV1": {
            "offset": 0,
            "totalRows": len(rows),
            "columns": [{"name": "cid", "label": "CID"}, {"name": "displayFile", "label": "File"}],
            "rows": rows,
        }
    }
