from django.dispatch import Signal


# sent before a term's stored values are serialized
# receivers get `resource`, `term`, `prefix` and a mutable `values` list, and
# may edit `values` in place or return a replacement list
values_pre = Signal()
