from dataclasses import dataclass, field

SEPARATOR = '.'


@dataclass
class LayerHierarchy:
    main: list = field(default_factory=list)
    internals: dict = field(default_factory=dict)


def split_layers(visualization):
    """Group a flat ``{layer name: LayerData}`` mapping for display.

    Names without a dot are top-level layers and keep their encounter order
    in ``main``. Dotted names are filed under the part before the first dot,
    so ``layer1.conv.relu`` lands in ``internals['layer1']``. A name starting
    with a dot has no parent and is dropped.

    The grouping is only deterministic if ``visualization`` iterates in
    insertion order, which holds for dicts decoded from JSON.
    """
    hierarchy = LayerHierarchy()
    for name, data in visualization.items():
        if SEPARATOR not in name:
            hierarchy.main.append((name, data))
            continue

        parent = name.split(SEPARATOR, 1)[0]
        if not parent:
            continue
        hierarchy.internals.setdefault(parent, []).append((name, data))
    return hierarchy


def sorted_internals(hierarchy, parent):
    return sorted(hierarchy.internals.get(parent, []), key=lambda item: item[0])


def internal_title(name, parent):
    return name.replace(f"{parent}{SEPARATOR}", '', 1)
