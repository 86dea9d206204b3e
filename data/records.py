import json

CSV_HEADER = (
    "id,name,value1,value2,value3,category,status,price,quantity,date,"
    "score1,score2,score3,priority,description,weight,count,type,ratio,flag"
)
CSV_COLUMNS = 20
CSV_BYTES_PER_RECORD = 250
JSON_BYTES_PER_RECORD = 120

def estimate_csv_records(size_mb: float) -> int:
    return int(size_mb * 1024 * 1024 / CSV_BYTES_PER_RECORD)

def estimate_json_records(size_mb: float) -> int:
    return int(size_mb * 1024 * 1024 / JSON_BYTES_PER_RECORD)

def csv_row(i: int) -> str:
    rid = i + 1
    kind = ("typeA", "typeB", "typeC")[i % 3]
    fields = [
        str(rid),
        f"Record_{rid}",
        f"{rid * 1.5:.3f}",
        f"{rid * 2.3:.3f}",
        f"{rid * 0.7:.3f}",
        str(i % 5 + 1),
        "active" if i % 2 == 0 else "inactive",
        f"{rid * 12.99:.2f}",
        str(i % 100 + 1),
        f"2024-{i % 12 + 1:02d}-{i % 28 + 1:02d}",
        f"{rid * 0.85:.3f}",
        f"{rid * 1.15:.3f}",
        f"{rid * 0.95:.3f}",
        str(i % 3 + 1),
        f"Description_{rid}",
        f"{rid * 2.5:.3f}",
        str(i % 50 + 1),
        kind,
        f"{rid * 0.123:.4f}",
        str(i % 2),
    ]
    return ",".join(fields)

def generate_csv_data(num_records: int) -> str:
    lines = [CSV_HEADER]
    lines.extend(csv_row(i) for i in range(num_records))
    return "\n".join(lines) + "\n"

def generate_json_data(num_records: int) -> str:
    records = [
        {
            "id": i + 1,
            "name": f"Record_{i + 1}",
            "value": (i + 1) * 3.14159,
            "active": i % 2 == 0,
        }
        for i in range(num_records)
    ]
    return json.dumps(records, indent=2)

def generate_test_csv(size_mb: float):
    if size_mb <= 0:
        return None
    return generate_csv_data(estimate_csv_records(size_mb))

def generate_test_json(size_mb: float):
    if size_mb <= 0:
        return None
    return generate_json_data(estimate_json_records(size_mb))
