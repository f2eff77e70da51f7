"""Binary search trees, chained hash tables and sequential search over integers."""