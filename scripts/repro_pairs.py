import sys
from pathlib import Path

# Ensure we import the repo-local htmlredline (not a pip-installed one).
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

import htmlredline  # noqa: E402


def main():
    before = (
        '<p><b>CLINICAL HISTORY:</b> Patient aged 0, gender not specified.</p>'
        '<p><b>FINDINGS:</b> Lung fields are clear. Bones are intact.</p>'
    )
    after = (
        '<p><b>CLINICAL HISTORY:</b> Patient aged 50, male.</p>'
        '<p><b>FINDINGS:</b></p>'
        '<ul><li>Lung fields are clear.</li><li>Bones are intact.</li></ul>'
    )

    differ = htmlredline.RedlineDiffer(before, after)
    for op in differ.get_operations():
        old = "".join(t.text for t in differ.old_tokens[op.start_in_old:op.end_in_old])
        new = "".join(t.text for t in differ.new_tokens[op.start_in_new:op.end_in_new])
        print("%-8s %r -> %r" % (op.action, old, new))
    print(differ.render())


if __name__ == "__main__":
    main()
