"""Game engine: boards, pieces, the 7-bag buffer, fields, stats and sessions."""