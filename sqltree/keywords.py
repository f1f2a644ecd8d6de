"""SQL keywords known to the tokenizer, and the sets reserved in alias position.

This is not a list of *reserved* keywords: most of them may still be parsed as
identifiers where the parser decides so.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Keyword",
    "ALL_KEYWORDS",
    "ALL_KEYWORDS_INDEX",
    "RESERVED_FOR_TABLE_ALIAS",
    "RESERVED_FOR_COLUMN_ALIAS",
    "lookup_keyword",
]

# Kept sorted so that the spellings form an ordered table.
_KEYWORD_NAMES = """
ABORT ABS ACTION ADD ALL ALLOCATE ALTER ANALYZE AND ANY APPLY ARE ARRAY
ARRAY_AGG ARRAY_MAX_CARDINALITY AS ASC ASENSITIVE ASSERT ASYMMETRIC AT ATOMIC
AUTHORIZATION AUTOINCREMENT AUTO_INCREMENT AVG AVRO
BEGIN BEGIN_FRAME BEGIN_PARTITION BETWEEN BIGINT BINARY BLOB BOOLEAN BOTH BY
BYTEA
CACHE CALL CALLED CARDINALITY CASCADE CASCADED CASE CAST CEIL CEILING CENTURY
CHAIN CHANGE CHAR CHARACTER CHARACTER_LENGTH CHARSET CHAR_LENGTH CHECK CLOB
CLOSE CLUSTER COALESCE COLLATE COLLECT COLUMN COLUMNS COMMENT COMMIT COMMITTED
COMPUTE CONDITION CONNECT CONNECTION CONSTRAINT CONTAINS CONVERT COPY CORR
CORRESPONDING COUNT COVAR_POP COVAR_SAMP CREATE CROSS CSV CUBE CUME_DIST
CURRENT CURRENT_CATALOG CURRENT_DATE CURRENT_DEFAULT_TRANSFORM_GROUP
CURRENT_PATH CURRENT_ROLE CURRENT_ROW CURRENT_SCHEMA CURRENT_TIME
CURRENT_TIMESTAMP CURRENT_TRANSFORM_GROUP_FOR_TYPE CURRENT_USER CURSOR CYCLE
DATA DATABASE DATE DAY DEALLOCATE DEC DECADE DECIMAL DECLARE DEFAULT DELETE
DELIMITED DELIMITER DENSE_RANK DEREF DESC DESCRIBE DETERMINISTIC DIRECTORY
DISCONNECT DISTINCT DISTRIBUTE DOUBLE DOW DOY DROP DUPLICATE DYNAMIC
EACH ELEMENT ELSE ENCODING END END_EXEC END_FRAME END_PARTITION ENGINE ENUM
EPOCH EQUALS ERROR ESCAPE EVENT EVERY EXCEPT EXEC EXECUTE EXISTS EXP EXPLAIN
EXTENDED EXTERNAL EXTRACT
FAIL FALSE FETCH FIELDS FILTER FIRST FIRST_VALUE FLOAT FLOOR FOLLOWING FOR
FORCE FORCE_NOT_NULL FORCE_NULL FORCE_QUOTE FOREIGN FORMAT FRAME_ROW FREE
FREEZE FROM FULL FUNCTION FUSION
GET GLOBAL GRANT GRANTED GROUP GROUPING GROUPS
HAVING HEADER HIVEVAR HOLD HOUR
IDENTITY IF IGNORE ILIKE IN INDEX INDICATOR INNER INOUT INPUTFORMAT INSENSITIVE
INSERT INT INTEGER INTERSECT INTERSECTION INTERVAL INTO IS ISODOW ISOLATION
ISOYEAR
JOIN JSONFILE JULIAN
KEY KILL
LAG LANGUAGE LARGE LAST LAST_VALUE LATERAL LEAD LEADING LEFT LEVEL LIKE
LIKE_REGEX LIMIT LISTAGG LN LOCAL LOCALTIME LOCALTIMESTAMP LOCATION LOWER
MANAGEDLOCATION MATCH MATCHED MATERIALIZED MAX MEMBER MERGE METADATA METHOD
MICROSECONDS MILLENIUM MILLISECONDS MIN MINUTE MOD MODIFIES MODULE MONTH MSCK
MULTISET MUTATION
NATIONAL NATURAL NCHAR NCLOB NEW NEXT NO NONE NORMALIZE NOSCAN NOT NTH_VALUE
NTILE NULL NULLIF NULLS NUMERIC NVARCHAR
OBJECT OCCURRENCES_REGEX OCTET_LENGTH OF OFFSET OLD ON ONLY OPEN OPTION OR ORC
ORDER OUT OUTER OUTPUTFORMAT OVER OVERFLOW OVERLAPS OVERLAY OVERWRITE
PARAMETER PARQUET PARTITION PARTITIONED PARTITIONS PERCENT PERCENTILE_CONT
PERCENTILE_DISC PERCENT_RANK PERIOD PORTION POSITION POSITION_REGEX POWER
PRECEDES PRECEDING PRECISION PREPARE PRESERVE PRIMARY PRIVILEGES PROCEDURE
PROGRAM PURGE
QUALIFY QUARTER QUERY QUOTE
RANGE RANK RCFILE READ READS REAL RECURSIVE REF REFERENCES REFERENCING REGCLASS
REGR_AVGX REGR_AVGY REGR_COUNT REGR_INTERCEPT REGR_R2 REGR_SLOPE REGR_SXX
REGR_SXY REGR_SYY RELEASE RENAME REPAIR REPEATABLE REPLACE RESTRICT RESULT
RETURN RETURNS REVOKE RIGHT ROLE ROLLBACK ROLLUP ROW ROWID ROWS ROW_NUMBER
SAVEPOINT SCHEMA SCOPE SCROLL SEARCH SECOND SELECT SENSITIVE SEQUENCE
SEQUENCEFILE SEQUENCES SERDE SERIALIZABLE SESSION SESSION_USER SET SETS SHARE
SHOW SIMILAR SMALLINT SNAPSHOT SOME SORT SPECIFIC SPECIFICTYPE SQL SQLEXCEPTION
SQLSTATE SQLWARNING SQRT START STATIC STATISTICS STDDEV_POP STDDEV_SAMP STDIN
STDOUT STORED STRING SUBMULTISET SUBSTRING SUBSTRING_REGEX SUCCEEDS SUM SUPER
SYMMETRIC SYNC SYSTEM SYSTEM_TIME SYSTEM_USER
TABLE TABLES TABLESAMPLE TBLPROPERTIES TEMP TEMPORARY TEXT TEXTFILE THEN TIES
TIME TIMESTAMP TIMEZONE TIMEZONE_HOUR TIMEZONE_MINUTE TINYINT TO TOP TRAILING
TRANSACTION TRANSLATE TRANSLATE_REGEX TRANSLATION TREAT TRIGGER TRIM TRIM_ARRAY
TRUE TRUNCATE TRY_CAST TYPE
UESCAPE UNBOUNDED UNCOMMITTED UNION UNIQUE UNKNOWN UNLOGGED UNNEST UNSIGNED
UPDATE UPPER USAGE USER USING UUID
VALUE VALUES VALUE_OF VARBINARY VARCHAR VARYING VAR_POP VAR_SAMP VERBOSE
VERSIONING VIEW VIRTUAL
WEEK WHEN WHENEVER WHERE WIDTH_BUCKET WINDOW WITH WITHIN WITHOUT WORK WRITE
XOR
YEAR
ZONE
""".split()

# Keywords whose SQL spelling differs from their member name.
_SPELLINGS = {"END_EXEC": "END-EXEC"}

Keyword = Enum(  # type: ignore[misc]
    "Keyword",
    [("NoKeyword", "")] + [(name, _SPELLINGS.get(name, name)) for name in _KEYWORD_NAMES],
    module=__name__,
    qualname="Keyword",
    type=str,
)
Keyword.__doc__ = "A keyword, valued by its upper-case SQL spelling; NoKeyword marks a plain word."

ALL_KEYWORDS_INDEX: tuple = tuple(Keyword[name] for name in _KEYWORD_NAMES)
ALL_KEYWORDS: tuple[str, ...] = tuple(kw.value for kw in ALL_KEYWORDS_INDEX)

_BY_SPELLING = {kw.value: kw for kw in ALL_KEYWORDS_INDEX}

_RESERVED_FOR_BOTH_ALIASES = (
    "WITH EXPLAIN ANALYZE SELECT WHERE GROUP SORT HAVING ORDER TOP LATERAL VIEW "
    "LIMIT OFFSET FETCH UNION EXCEPT INTERSECT"
).split()

#: Keywords that can't be a table alias, so ``FROM table_name alias`` parses without lookahead.
RESERVED_FOR_TABLE_ALIAS = frozenset(
    Keyword[name]
    for name in _RESERVED_FOR_BOTH_ALIASES
    + "ON JOIN INNER CROSS FULL LEFT RIGHT NATURAL USING CLUSTER DISTRIBUTE OUTER SET QUALIFY".split()
)

#: Keywords that can't be a column alias, so ``SELECT <expr> alias`` parses without lookahead.
RESERVED_FOR_COLUMN_ALIAS = frozenset(
    Keyword[name]
    for name in _RESERVED_FOR_BOTH_ALIASES + "CLUSTER DISTRIBUTE FROM INTO".split()
)


def lookup_keyword(word):
    """Return the keyword spelled by ``word`` (case-insensitive), or ``Keyword.NoKeyword``."""
    return _BY_SPELLING.get(word.upper(), Keyword.NoKeyword)